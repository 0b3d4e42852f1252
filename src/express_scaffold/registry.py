"""Template registry mapping template keys to generated file contents.

Every member of :class:`TemplateKey` has exactly one renderer and one target
path. The mappings are checked when this module is imported, so adding a key
without wiring it up fails immediately instead of at scaffold time.

Renderers are pure: they only read the :class:`~express_scaffold.config.ProjectSpec`
they are given and always return the same text for the same spec.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable, Mapping, Sequence

from .boilerplate import examples, middleware, project, server
from .config import ProjectSpec
from .template import TemplateRenderer

__all__ = ["TemplateKey", "render", "target_path"]


class TemplateKey(str, Enum):
    """Closed set of files the scaffolder knows how to generate."""

    ENTRY_POINT = "entry_point"
    APP = "app"
    DATABASE_CONFIG = "database_config"
    AUTH_MIDDLEWARE = "auth_middleware"
    ERROR_HANDLER = "error_handler"
    LOGGER = "logger"
    AUTH_ROUTES = "auth_routes"
    HEALTH_ROUTES = "health_routes"
    EXAMPLE_CONTROLLER = "example_controller"
    EXAMPLE_MODEL = "example_model"
    PACKAGE_MANIFEST = "package_manifest"
    ENV_FILE = "env_file"
    IGNORE_FILE = "ignore_file"
    TSCONFIG = "tsconfig"
    WATCH_CONFIG = "watch_config"
    README = "readme"
    QUICK_ENTRY_POINT = "quick_entry_point"
    QUICK_MANIFEST = "quick_manifest"
    QUICK_TSCONFIG = "quick_tsconfig"
    QUICK_WATCH_CONFIG = "quick_watch_config"
    QUICK_ENV_FILE = "quick_env_file"
    QUICK_IGNORE_FILE = "quick_ignore_file"


_RENDERER = TemplateRenderer()

# Source files take the extension of the selected language.
_SOURCE_PATHS: Mapping[TemplateKey, str] = {
    TemplateKey.ENTRY_POINT: "index",
    TemplateKey.APP: "src/app",
    TemplateKey.DATABASE_CONFIG: "src/config/database",
    TemplateKey.AUTH_MIDDLEWARE: "src/middlewares/auth",
    TemplateKey.ERROR_HANDLER: "src/middlewares/errorHandler",
    TemplateKey.LOGGER: "src/utils/logger",
    TemplateKey.AUTH_ROUTES: "src/routes/auth",
    TemplateKey.HEALTH_ROUTES: "src/routes/index",
    TemplateKey.EXAMPLE_CONTROLLER: "src/controllers/userController",
    TemplateKey.EXAMPLE_MODEL: "src/models/User",
    TemplateKey.QUICK_ENTRY_POINT: "index",
}

_STATIC_PATHS: Mapping[TemplateKey, str] = {
    TemplateKey.PACKAGE_MANIFEST: "package.json",
    TemplateKey.QUICK_MANIFEST: "package.json",
    TemplateKey.ENV_FILE: ".env",
    TemplateKey.QUICK_ENV_FILE: ".env",
    TemplateKey.IGNORE_FILE: ".gitignore",
    TemplateKey.QUICK_IGNORE_FILE: ".gitignore",
    TemplateKey.TSCONFIG: "tsconfig.json",
    TemplateKey.QUICK_TSCONFIG: "tsconfig.json",
    TemplateKey.WATCH_CONFIG: "nodemon.json",
    TemplateKey.QUICK_WATCH_CONFIG: "nodemon.json",
    TemplateKey.README: "README.md",
}


def target_path(key: TemplateKey, spec: ProjectSpec) -> str:
    """Return the POSIX path, relative to the project root, for ``key``."""

    if key in _SOURCE_PATHS:
        return f"{_SOURCE_PATHS[key]}.{spec.extension}"
    return _STATIC_PATHS[key]


def _context(spec: ProjectSpec) -> dict[str, Any]:
    return {
        "name": spec.name,
        "package_name": spec.package_name,
        "package_manager": spec.package_manager,
        "welcome_message": f"Welcome to {spec.name} API",
        "database_name": f"{spec.package_name.replace('-', '_')}_dev",
    }


def _fill(template: str, spec: ProjectSpec, **extra: Any) -> str:
    context = _context(spec)
    context.update(extra)
    return _RENDERER.render_string(template, context)


def _variant(typescript: str, javascript: str) -> Callable[[ProjectSpec], str]:
    def render_variant(spec: ProjectSpec) -> str:
        return _fill(typescript if spec.typescript else javascript, spec)

    return render_variant


def _json(data: Mapping[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


def _auth_routes(spec: ProjectSpec) -> str:
    if spec.typescript:
        return _fill(server.AUTH_ROUTES_TS, spec, **server.AUTH_ROUTES_TS_CONTEXT)
    return _fill(server.AUTH_ROUTES_JS, spec, **server.AUTH_ROUTES_JS_CONTEXT)


def _package_manifest(spec: ProjectSpec) -> str:
    typescript = spec.typescript
    scripts = {
        "test": 'echo "Error: no test specified" && exit 1',
        "start": "node dist/index.js" if typescript else "node index.js",
    }
    manifest: dict[str, Any] = {
        "name": spec.package_name,
        "version": "1.0.0",
        "description": "",
        "main": "dist/index.js" if typescript else "index.js",
        "scripts": scripts,
        "keywords": [],
        "author": "",
        "license": "ISC",
        "dependencies": dict(project.RUNTIME_DEPENDENCIES),
    }
    if typescript:
        scripts["dev"] = "nodemon"
        scripts["build"] = "tsc"
        manifest["devDependencies"] = dict(project.TYPESCRIPT_DEV_DEPENDENCIES)
    else:
        scripts["dev"] = "nodemon index.js"
        manifest["devDependencies"] = dict(project.JAVASCRIPT_DEV_DEPENDENCIES)
    return _json(manifest)


def _quick_manifest(spec: ProjectSpec) -> str:
    typescript = spec.typescript
    scripts = {
        "start": "node dist/index.js" if typescript else "node index.js",
        "dev": "nodemon" if typescript else "nodemon index.js",
    }
    manifest: dict[str, Any] = {
        "name": spec.package_name,
        "version": "1.0.0",
        "main": "dist/index.js" if typescript else "index.js",
        "scripts": scripts,
        "dependencies": dict(project.QUICK_RUNTIME_DEPENDENCIES),
    }
    if typescript:
        scripts["build"] = "tsc"
        manifest["devDependencies"] = dict(project.QUICK_TYPESCRIPT_DEV_DEPENDENCIES)
    return _json(manifest)


def _watch_config(spec: ProjectSpec) -> str:
    return _json(project.WATCH_CONFIG_TS if spec.typescript else project.WATCH_CONFIG_JS)


_TreeNode = tuple[str, str, Sequence["_TreeNode"]]
_COMMENT_COLUMN = 24


def _tree_lines(nodes: Sequence[_TreeNode], prefix: str = "") -> list[str]:
    lines: list[str] = []
    for index, (label, comment, children) in enumerate(nodes):
        last = index == len(nodes) - 1
        line = f"{prefix}{'└── ' if last else '├── '}{label}"
        if comment:
            line = f"{line.ljust(_COMMENT_COLUMN - 1)} # {comment}"
        lines.append(line)
        lines.extend(_tree_lines(children, prefix + ("    " if last else "│   ")))
    return lines


def _project_structure(spec: ProjectSpec) -> str:
    ext = spec.extension
    controllers: list[_TreeNode] = []
    src: list[_TreeNode] = [
        ("config/", "Configuration files", [(f"database.{ext}", "Database configuration", [])]),
        ("controllers/", "Route handler logic", controllers),
        (
            "middlewares/",
            "Custom middleware",
            [
                (f"auth.{ext}", "JWT authentication middleware", []),
                (f"errorHandler.{ext}", "Global error handler", []),
            ],
        ),
    ]
    if spec.include_examples:
        controllers.append((f"userController.{ext}", "Example controller", []))
        src.append(("models/", "Data models", [(f"User.{ext}", "Example model", [])]))
    src.extend(
        [
            (
                "routes/",
                "API route definitions",
                [
                    (f"index.{ext}", "Health check routes", []),
                    (f"auth.{ext}", "Authentication routes", []),
                ],
            ),
            ("utils/", "Helper functions", [(f"logger.{ext}", "Logging utility", [])]),
            (f"app.{ext}", "Express app setup", []),
        ]
    )

    root: list[_TreeNode] = [("src/", "", src)]
    if spec.typescript:
        root.append(("dist/", "Compiled JavaScript (auto-generated)", []))
    root.extend(
        [
            (".env", "Environment variables", []),
            (".gitignore", "Git ignore rules", []),
            (f"index.{ext}", "Application entry point", []),
            ("package.json", "Project dependencies and scripts", []),
        ]
    )
    if spec.typescript:
        root.append(("tsconfig.json", "TypeScript configuration", []))
    root.extend(
        [
            ("nodemon.json", "Nodemon configuration", []),
            ("README.md", "This file", []),
        ]
    )
    return "\n".join([f"{spec.name}/", *_tree_lines(root)])


def _readme(spec: ProjectSpec) -> str:
    manager = spec.package_manager
    build_section = ""
    if spec.typescript:
        build_section = _fill(
            project.README_BUILD_SECTION,
            spec,
            build_command=manager.run("build"),
            start_command=manager.run("start"),
        )
    return _fill(
        project.README,
        spec,
        flavour="with TypeScript" if spec.typescript else "project",
        install_command=" ".join(manager.install_command),
        dev_command=manager.run("dev"),
        build_section=build_section,
        structure=_project_structure(spec),
    )


_RENDERERS: Mapping[TemplateKey, Callable[[ProjectSpec], str]] = {
    TemplateKey.ENTRY_POINT: _variant(server.ENTRY_POINT_TS, server.ENTRY_POINT_JS),
    TemplateKey.APP: _variant(server.APP_TS, server.APP_JS),
    TemplateKey.DATABASE_CONFIG: _variant(server.DATABASE_CONFIG_TS, server.DATABASE_CONFIG_JS),
    TemplateKey.AUTH_MIDDLEWARE: _variant(middleware.AUTH_MIDDLEWARE_TS, middleware.AUTH_MIDDLEWARE_JS),
    TemplateKey.ERROR_HANDLER: _variant(middleware.ERROR_HANDLER_TS, middleware.ERROR_HANDLER_JS),
    TemplateKey.LOGGER: _variant(middleware.LOGGER_TS, middleware.LOGGER_JS),
    TemplateKey.AUTH_ROUTES: _auth_routes,
    TemplateKey.HEALTH_ROUTES: _variant(server.HEALTH_ROUTES_TS, server.HEALTH_ROUTES_JS),
    TemplateKey.EXAMPLE_CONTROLLER: _variant(examples.CONTROLLER_TS, examples.CONTROLLER_JS),
    TemplateKey.EXAMPLE_MODEL: _variant(examples.MODEL_TS, examples.MODEL_JS),
    TemplateKey.PACKAGE_MANIFEST: _package_manifest,
    TemplateKey.ENV_FILE: lambda spec: _fill(project.ENV_FILE, spec),
    TemplateKey.IGNORE_FILE: lambda spec: project.IGNORE_FILE,
    TemplateKey.TSCONFIG: lambda spec: _json(project.TSCONFIG),
    TemplateKey.WATCH_CONFIG: _watch_config,
    TemplateKey.README: _readme,
    TemplateKey.QUICK_ENTRY_POINT: _variant(server.QUICK_ENTRY_POINT_TS, server.QUICK_ENTRY_POINT_JS),
    TemplateKey.QUICK_MANIFEST: _quick_manifest,
    TemplateKey.QUICK_TSCONFIG: lambda spec: _json(project.QUICK_TSCONFIG),
    TemplateKey.QUICK_WATCH_CONFIG: lambda spec: _json(project.QUICK_WATCH_CONFIG),
    TemplateKey.QUICK_ENV_FILE: lambda spec: project.QUICK_ENV_FILE,
    TemplateKey.QUICK_IGNORE_FILE: lambda spec: project.QUICK_IGNORE_FILE,
}


def _check_exhaustive() -> None:
    keys = set(TemplateKey)
    unrendered = keys - set(_RENDERERS)
    unplaced = keys - set(_SOURCE_PATHS) - set(_STATIC_PATHS)
    if unrendered or unplaced:
        missing = sorted(key.value for key in unrendered | unplaced)
        raise RuntimeError(f"template keys without renderer or path: {', '.join(missing)}")


_check_exhaustive()


def render(key: TemplateKey, spec: ProjectSpec) -> str:
    """Return the full text of the file identified by ``key`` for ``spec``."""

    return _RENDERERS[key](spec)
