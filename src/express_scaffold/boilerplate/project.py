"""Project level files: manifests, tool configuration, environment and docs."""

from __future__ import annotations

RUNTIME_DEPENDENCIES = {
    "express": "^5.1.0",
    "cors": "^2.8.5",
    "dotenv": "^17.2.1",
    "jsonwebtoken": "^9.0.0",
    "bcryptjs": "^2.4.3",
}

TYPESCRIPT_DEV_DEPENDENCIES = {
    "@types/express": "^5.0.3",
    "@types/cors": "^2.8.19",
    "@types/node": "^24.1.0",
    "@types/jsonwebtoken": "^9.0.0",
    "@types/bcryptjs": "^2.4.0",
    "nodemon": "^3.1.10",
    "ts-node": "^10.9.2",
    "typescript": "^5.9.2",
}

JAVASCRIPT_DEV_DEPENDENCIES = {
    "nodemon": "^3.1.10",
}

QUICK_RUNTIME_DEPENDENCIES = {
    "express": "^5.1.0",
    "cors": "^2.8.5",
    "dotenv": "^17.2.1",
}

QUICK_TYPESCRIPT_DEV_DEPENDENCIES = {
    "@types/express": "^5.0.3",
    "@types/cors": "^2.8.19",
    "@types/node": "^24.1.0",
    "nodemon": "^3.1.10",
    "ts-node": "^10.9.2",
    "typescript": "^5.9.2",
}

TSCONFIG = {
    "compilerOptions": {
        "outDir": "./dist",
        "target": "ES2020",
        "module": "commonjs",
        "esModuleInterop": True,
        "lib": ["esnext"],
        "types": ["node"],
        "sourceMap": True,
        "declaration": True,
        "declarationMap": True,
        "noUncheckedIndexedAccess": True,
        "exactOptionalPropertyTypes": True,
        "strict": True,
        "jsx": "react-jsx",
        "isolatedModules": True,
        "noUncheckedSideEffectImports": True,
        "moduleDetection": "force",
        "skipLibCheck": True,
    },
    "exclude": ["node_modules", "dist"],
    "include": ["src/**/*.ts", "index.ts"],
}

QUICK_TSCONFIG = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "commonjs",
        "outDir": "./dist",
        "esModuleInterop": True,
        "strict": True,
        "skipLibCheck": True,
    },
    "include": ["src/**/*", "index.ts"],
}

WATCH_CONFIG_TS = {
    "watch": ["src", "index.ts"],
    "ext": "ts",
    "ignore": ["dist"],
    "exec": "ts-node index.ts",
}

WATCH_CONFIG_JS = {
    "watch": ["src", "index.js"],
    "ext": "js",
    "ignore": ["node_modules"],
    "exec": "node index.js",
}

QUICK_WATCH_CONFIG = {
    "watch": ["src", "index.ts"],
    "ext": "ts",
    "exec": "ts-node index.ts",
}

ENV_FILE = """# Environment variables
PORT=3000
NODE_ENV=development

# JWT Secret (change this in production!)
JWT_SECRET=your_super_secret_jwt_key_change_this_in_production

# Database
DB_HOST=localhost
DB_PORT=5432
DB_NAME={{ database_name }}
DB_USER=postgres
DB_PASSWORD=password

# API Keys
# API_KEY=your_api_key_here
"""

QUICK_ENV_FILE = """PORT=3000
NODE_ENV=development
"""

IGNORE_FILE = """# Dependencies
node_modules/
jspm_packages/
bower_components
npm-debug.log*
yarn-debug.log*
yarn-error.log*
pnpm-debug.log*

# Runtime data
pids
*.pid
*.seed
*.pid.lock

# Coverage
lib-cov
coverage/
*.lcov
.nyc_output

# Build output
build/Release
dist
*.tsbuildinfo
*.tgz

# Caches
.npm
.eslintcache
.cache
.parcel-cache
.rpt2_cache/
.rts2_cache_cjs/
.rts2_cache_es/
.rts2_cache_umd/
.node_repl_history
.yarn-integrity

# dotenv environment variables file
.env
.env.test
.env.production

# Temporary folders
tmp/
temp/

# IDEs and editors
.vscode/
.idea/
*.swp
*.swo
*~

# OS generated files
.DS_Store
.DS_Store?
._*
.Spotlight-V100
.Trashes
ehthumbs.db
Thumbs.db
"""

QUICK_IGNORE_FILE = """node_modules/
.env
dist/
*.log
"""

README = """# {{ name }}

A scalable Node.js Express backend {{ flavour }} featuring JWT authentication, structured middleware, and professional organization.

## Features

- ✨ **Modern Architecture** - Clean, scalable folder structure
- 🔐 **JWT Authentication** - Ready-to-use auth system with registration, login, and protected routes
- 🛡️ **Security First** - Password hashing with bcrypt, secure JWT implementation
- 🔧 **Professional Middleware** - Error handling, logging, and authentication middleware
- 🏗️ **Organized Structure** - Separate concerns with config, controllers, middleware, routes, and utilities
- 🔄 **Hot Reload** - Development server with automatic restart

## Getting Started

### Prerequisites

- Node.js (v16 or higher)
- {{ package_manager }}

### Installation

1. Clone the repository
```bash
git clone <repository-url>
cd {{ name }}
```

2. Install dependencies
```bash
{{ install_command }}
```

3. Configure environment variables
```bash
# Update the JWT_SECRET and other variables in .env file
cp .env .env.local
```

4. **Important**: Change the JWT_SECRET in your `.env` file before running in production!

### Development

Start the development server:
```bash
{{ dev_command }}
```
{{ build_section }}
## Project Structure

```
{{ structure }}
```

## API Endpoints

### Public Routes
- `GET /` - Welcome message
- `GET /api/health` - Health check endpoint
- `POST /api/auth/register` - User registration
- `POST /api/auth/login` - User login

### Protected Routes
- `GET /api/auth/profile` - Get user profile (requires JWT token)

### Authentication Usage

1. **Register a new user:**
```bash
curl -X POST http://localhost:3000/api/auth/register \\
  -H "Content-Type: application/json" \\
  -d '{"email": "user@example.com", "password": "yourpassword"}'
```

2. **Login:**
```bash
curl -X POST http://localhost:3000/api/auth/login \\
  -H "Content-Type: application/json" \\
  -d '{"email": "user@example.com", "password": "yourpassword"}'
```

3. **Access protected routes:**
```bash
curl -X GET http://localhost:3000/api/auth/profile \\
  -H "Authorization: Bearer YOUR_JWT_TOKEN"
```

## Environment Variables

- `PORT` - Server port (default: 3000)
- `NODE_ENV` - Environment (development/production)
- `JWT_SECRET` - Secret key for JWT token signing (⚠️ **Change this in production!**)
- `DB_HOST` - Database host
- `DB_PORT` - Database port
- `DB_NAME` - Database name
- `DB_USER` - Database username
- `DB_PASSWORD` - Database password

## Extending the API

1. **Add new routes**: Create files in `src/routes/`
2. **Add controllers**: Create files in `src/controllers/`
3. **Add middleware**: Create files in `src/middlewares/`
4. **Add utilities**: Create files in `src/utils/`
5. **Database models**: Add to `src/models/`

## License

This project is licensed under the ISC License.
"""

README_BUILD_SECTION = """
### Build

Build for production:
```bash
{{ build_command }}
```

### Production

Start the production server:
```bash
{{ start_command }}
```
"""
