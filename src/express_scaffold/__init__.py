"""Interactive scaffolding of Express server projects.

The package collects a handful of answers (project name, TypeScript or
JavaScript, package manager and optional extras), renders a fixed library of
templates for that choice and writes them to disk. Two feature sets are
shipped: :data:`FULL`, with authentication, middleware and optional examples,
and :data:`QUICK`, a minimal entry point with tool configuration.
"""

from __future__ import annotations

from .assembler import AssemblyReport, ProjectAssembler
from .config import Language, PackageManager, ProjectSpec
from .errors import LayoutError, MissingProjectNameError, ScaffoldError
from .layout import FULL, QUICK, FeatureSet, FileEntry, build_plan
from .prompts import PromptCollector
from .registry import TemplateKey, render, target_path

__all__ = [
    "FULL",
    "QUICK",
    "AssemblyReport",
    "FeatureSet",
    "FileEntry",
    "Language",
    "LayoutError",
    "MissingProjectNameError",
    "PackageManager",
    "ProjectAssembler",
    "ProjectSpec",
    "PromptCollector",
    "ScaffoldError",
    "TemplateKey",
    "build_plan",
    "render",
    "target_path",
]

__version__ = "0.1.0"
