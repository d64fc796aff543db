"""Static option tables and constants for the template generator."""

from __future__ import annotations

AI_CHOICES: dict[str, str] = {
    "cursor": "Cursor",
    "claude": "Claude",
    "gemini": "Gemini",
}

CATEGORY_CHOICES: dict[str, str] = {
    "backend": "Backend",
    "frontend": "Frontend",
    "infra": "Infrastructure",
}

# Every category above must have an entry here.
FRAMEWORK_CHOICES: dict[str, dict[str, str]] = {
    "backend": {
        "fastify": "Fastify",
        "nestjs": "NestJS",
        "koa": "Koa",
        "express": "Express",
        "hapi": "Hapi",
    },
    "frontend": {
        "react": "React",
        "vue": "Vue",
        "angular": "Angular",
        "svelte": "Svelte",
        "nextjs": "Next.js",
    },
    "infra": {
        "docker": "Docker",
        "kubernetes": "Kubernetes",
        "terraform": "Terraform",
        "aws-cdk": "AWS CDK",
        "pulumi": "Pulumi",
    },
}

TEMPLATES_ROOT_ENV = "AI_TEMPLATES_ROOT"

# Cursor used to read a single .cursorrules file; it now reads .cursor/rules/*.mdc
LEGACY_RULES_TOOL = "cursor"
LEGACY_RULES_FILENAME = ".cursorrules"
RULES_DIRNAME = "rules"
RULES_FILENAME = "rules.mdc"

BANNER = "🚀 AI Templates Generator"
TAGLINE = "Generate templates for your favorite AI tools"

__all__ = [
    "AI_CHOICES",
    "BANNER",
    "CATEGORY_CHOICES",
    "FRAMEWORK_CHOICES",
    "LEGACY_RULES_FILENAME",
    "LEGACY_RULES_TOOL",
    "RULES_DIRNAME",
    "RULES_FILENAME",
    "TAGLINE",
    "TEMPLATES_ROOT_ENV",
]
