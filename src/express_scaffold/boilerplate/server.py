"""Entry point, application wiring and route sources for generated projects."""

from __future__ import annotations

ENTRY_POINT_TS = """import app from './src/app';
import { logger } from './src/utils/logger';

const PORT = process.env.PORT || 3000;

app.listen(PORT, () => {
  logger.info(`Server running on port ${PORT}`);
});
"""

ENTRY_POINT_JS = """const app = require('./src/app');
const { logger } = require('./src/utils/logger');

const PORT = process.env.PORT || 3000;

app.listen(PORT, () => {
  logger.info(`Server running on port ${PORT}`);
});
"""

QUICK_ENTRY_POINT_TS = """import express from 'express';
import cors from 'cors';

const app = express();
const PORT = 3000;

app.use(express.json());
app.use(cors());

app.get('/', (req, res) => {
  res.json({ message: 'Hello World!' });
});

app.listen(PORT, () => console.log(`Server on port ${PORT}`));
"""

QUICK_ENTRY_POINT_JS = """const express = require('express');
const cors = require('cors');

const app = express();
const PORT = 3000;

app.use(express.json());
app.use(cors());

app.get('/', (req, res) => {
  res.json({ message: 'Hello World!' });
});

app.listen(PORT, () => console.log(`Server on port ${PORT}`));
"""

APP_TS = """import express from 'express';
import cors from 'cors';
import dotenv from 'dotenv';
import routes from './routes';
import authRoutes from './routes/auth';
import { errorHandler } from './middlewares/errorHandler';

dotenv.config();

const app = express();

// Middleware
app.use(express.json());
app.use(express.urlencoded({ extended: true }));
app.use(cors());

// Routes
app.get('/', (req, res) => {
  res.json({
    message: {{ welcome_message|js }},
    timestamp: new Date().toISOString()
  });
});

app.use('/api', routes);
app.use('/api/auth', authRoutes);

// Error handling middleware
app.use(errorHandler);

export default app;
"""

APP_JS = """const express = require('express');
const cors = require('cors');
require('dotenv').config();

const routes = require('./routes');
const authRoutes = require('./routes/auth');
const { errorHandler } = require('./middlewares/errorHandler');

const app = express();

// Middleware
app.use(express.json());
app.use(express.urlencoded({ extended: true }));
app.use(cors());

// Routes
app.get('/', (req, res) => {
  res.json({
    message: {{ welcome_message|js }},
    timestamp: new Date().toISOString()
  });
});

app.use('/api', routes);
app.use('/api/auth', authRoutes);

// Error handling middleware
app.use(errorHandler);

module.exports = app;
"""

HEALTH_ROUTES_TS = """import express from 'express';
import type { Request, Response } from 'express';

const router = express.Router();

// Health check
router.get('/health', (_: Request, res: Response) => {
  res.json({ status: 'OK', timestamp: new Date().toISOString() });
});

export default router;
"""

HEALTH_ROUTES_JS = """const express = require('express');
const router = express.Router();

// Health check
router.get('/health', (req, res) => {
  res.json({ status: 'OK', timestamp: new Date().toISOString() });
});

module.exports = router;
"""

# Shared between both variants; only the imports, typing and export differ.
_AUTH_ROUTES_BODY = """
// Mock user data (replace with database)
const users{{ users_type }} = [];

// Register route
router.post('/register', async (req, res) => {
  try {
    const { email, password } = req.body;

    // Check if user already exists
    const existingUser = users.find(u => u.email === email);
    if (existingUser) {
      return res.status(400).json({ message: 'User already exists' });
    }

    // Hash password
    const hashedPassword = await bcrypt.hash(password, 10);

    // Create user
    const user = {
      id: users.length + 1,
      email,
      password: hashedPassword,
      createdAt: new Date()
    };

    users.push(user);

    // Generate JWT
    const token = jwt.sign(
      { userId: user.id, email: user.email },
      {{ jwt_secret }},
      { expiresIn: '24h' }
    );

    res.status(201).json({
      message: 'User created successfully',
      token,
      user: { id: user.id, email: user.email }
    });
  } catch (error) {
    res.status(500).json({ message: 'Server error' });
  }
});

// Login route
router.post('/login', async (req, res) => {
  try {
    const { email, password } = req.body;

    // Find user
    const user = users.find(u => u.email === email);
    if (!user) {
      return res.status(400).json({ message: 'Invalid credentials' });
    }

    // Check password
    const validPassword = await bcrypt.compare(password, user.password);
    if (!validPassword) {
      return res.status(400).json({ message: 'Invalid credentials' });
    }

    // Generate JWT
    const token = jwt.sign(
      { userId: user.id, email: user.email },
      {{ jwt_secret }},
      { expiresIn: '24h' }
    );

    res.json({
      message: 'Login successful',
      token,
      user: { id: user.id, email: user.email }
    });
  } catch (error) {
    res.status(500).json({ message: 'Server error' });
  }
});

// Protected route example
router.get('/profile', authenticate, ({{ profile_request }}, res) => {
  res.json({ message: 'Protected route accessed', user: req.user });
});
"""

AUTH_ROUTES_TS = (
    """import express from 'express';
import bcrypt from 'bcryptjs';
import jwt from 'jsonwebtoken';
import { authenticate } from '../middlewares/auth';

const router = express.Router();
"""
    + _AUTH_ROUTES_BODY
    + """
export default router;
"""
)

AUTH_ROUTES_JS = (
    """const express = require('express');
const bcrypt = require('bcryptjs');
const jwt = require('jsonwebtoken');
const { authenticate } = require('../middlewares/auth');

const router = express.Router();
"""
    + _AUTH_ROUTES_BODY
    + """
module.exports = router;
"""
)

AUTH_ROUTES_TS_CONTEXT = {
    "users_type": ": any[]",
    "jwt_secret": "process.env.JWT_SECRET as string",
    "profile_request": "req: any",
}

AUTH_ROUTES_JS_CONTEXT = {
    "users_type": "",
    "jwt_secret": "process.env.JWT_SECRET",
    "profile_request": "req",
}

DATABASE_CONFIG_TS = """// Database configuration
export const dbConfig = {
  development: {
    host: process.env.DB_HOST || 'localhost',
    port: parseInt(process.env.DB_PORT || '5432'),
    database: process.env.DB_NAME || {{ database_name|js }},
    username: process.env.DB_USER || 'postgres',
    password: process.env.DB_PASSWORD || 'password'
  },
  production: {
    host: process.env.DB_HOST,
    port: parseInt(process.env.DB_PORT || '5432'),
    database: process.env.DB_NAME,
    username: process.env.DB_USER,
    password: process.env.DB_PASSWORD
  }
};

export const getDbConfig = () => {
  const env = process.env.NODE_ENV || 'development';
  return dbConfig[env as keyof typeof dbConfig];
};
"""

DATABASE_CONFIG_JS = """// Database configuration
const dbConfig = {
  development: {
    host: process.env.DB_HOST || 'localhost',
    port: parseInt(process.env.DB_PORT || '5432'),
    database: process.env.DB_NAME || {{ database_name|js }},
    username: process.env.DB_USER || 'postgres',
    password: process.env.DB_PASSWORD || 'password'
  },
  production: {
    host: process.env.DB_HOST,
    port: parseInt(process.env.DB_PORT || '5432'),
    database: process.env.DB_NAME,
    username: process.env.DB_USER,
    password: process.env.DB_PASSWORD
  }
};

const getDbConfig = () => {
  const env = process.env.NODE_ENV || 'development';
  return dbConfig[env];
};

module.exports = { dbConfig, getDbConfig };
"""
