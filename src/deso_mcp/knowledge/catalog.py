"""Read-only knowledge catalog loaded from the packaged YAML data files.

Each file is parsed and validated once per process; callers get the same
model instance on every lookup.
"""
from __future__ import annotations
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any
import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


# API catalog

class Endpoint(BaseModel):
    method: str
    url: str
    handler: str
    description: str
    sdk_function: str
    required: list[str] = Field(default_factory=list)
    optional: list[str] = Field(default_factory=list)
    deprecated: bool = False


class ApiCategory(BaseModel):
    description: str
    backend_file: str
    documentation: dict[str, list[str]] = Field(default_factory=dict)
    endpoints: dict[str, Endpoint]


class ApiCatalog(BaseModel):
    categories: dict[str, ApiCategory]

    def find_endpoint(self, name: str) -> tuple[str, ApiCategory, Endpoint] | None:
        """Locate an endpoint by name across all categories."""
        for category_name, category in self.categories.items():
            if name in category.endpoints:
                return category_name, category, category.endpoints[name]
        return None


# Guides

class Guide(BaseModel):
    title: str
    content: str


class DebuggingGuide(BaseModel):
    title: str
    summary: str
    content: str
    code: str = ""


class GuideCatalog(BaseModel):
    sdk: dict[str, Guide]
    architecture: dict[str, str]
    architecture_overview: str
    architecture_code: str
    debugging: dict[str, DebuggingGuide]
    patterns: dict[str, Guide]
    patterns_overview: str


# Code templates

class AuthSnippets(BaseModel):
    import_: str = Field("", alias="import")
    setup: str = ""
    public_key: str


class CodeCatalog(BaseModel):
    templates: dict[str, dict[str, str]]
    auth: AuthSnippets
    no_auth: AuthSnippets
    full_example_setup: str


# UI components

class Component(BaseModel):
    title: str
    description: str
    dependencies: list[str] = Field(default_factory=list)
    props: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class ComponentCategory(BaseModel):
    description: str
    components: dict[str, Component]


class Layout(BaseModel):
    title: str
    description: str
    components: list[str]
    layout: str


class ComponentRegistry(BaseModel):
    install_url: str
    categories: dict[str, ComponentCategory]
    layouts: dict[str, Layout]

    def find(self, name: str) -> tuple[str, Component] | None:
        """Locate a component by name, returning its category too."""
        for category_name, category in self.categories.items():
            if name in category.components:
                return category_name, category.components[name]
        return None

    def install_command(self, name: str) -> str:
        return f"npx shadcn@latest add {self.install_url.format(name=name)}"


# GraphQL

class QueryTemplate(BaseModel):
    title: str
    description: str
    query: str
    example: str
    paginated: bool = True


class SchemaNotes(BaseModel):
    title: str
    description: str
    fields: str
    filters: str


class QueryExample(BaseModel):
    title: str
    description: str
    query: str


class BuildRule(BaseModel):
    name: str
    explanation: str
    query: str
    all_keywords: list[str] = Field(default_factory=list)
    any_keywords: list[str] = Field(default_factory=list)

    def matches(self, question: str) -> bool:
        """Check a lowercased question against this rule's keywords."""
        if self.all_keywords and not all(k in question for k in self.all_keywords):
            return False
        if self.any_keywords and not any(k in question for k in self.any_keywords):
            return False
        return bool(self.all_keywords or self.any_keywords)


class GraphQLCatalog(BaseModel):
    endpoint: str
    queries: dict[str, QueryTemplate]
    schemas: dict[str, SchemaNotes]
    examples: dict[str, list[QueryExample]]
    build_rules: list[BuildRule]
    default_rule: BuildRule
    explain_features: list[tuple[str, str]]


def _load_yaml(name: str) -> dict[str, Any]:
    path = DATA_DIR / name
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Knowledge file {path} must contain a mapping")
    logger.debug(f"Loaded knowledge file {path}")
    return data


@lru_cache(maxsize=None)
def api_catalog() -> ApiCatalog:
    return ApiCatalog.model_validate(_load_yaml("api.yaml"))


@lru_cache(maxsize=None)
def guide_catalog() -> GuideCatalog:
    return GuideCatalog.model_validate(_load_yaml("guides.yaml"))


@lru_cache(maxsize=None)
def code_catalog() -> CodeCatalog:
    return CodeCatalog.model_validate(_load_yaml("code.yaml"))


@lru_cache(maxsize=None)
def component_registry() -> ComponentRegistry:
    return ComponentRegistry.model_validate(_load_yaml("ui_components.yaml"))


@lru_cache(maxsize=None)
def graphql_catalog() -> GraphQLCatalog:
    return GraphQLCatalog.model_validate(_load_yaml("graphql.yaml"))
