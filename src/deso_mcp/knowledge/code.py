"""Code snippet generation from the packaged templates."""
from __future__ import annotations

from string import Template

from .catalog import code_catalog


def fallback_snippet(operation: str, language: str) -> str:
    return (
        f"// {operation} example in {language}\n"
        f"// Generated code for DeSo {operation} operation\n"
        f"console.log('{operation} implementation here');"
    )


def render_snippet(operation: str, language: str, include_auth: bool = False) -> str:
    """Fill an operation/language template, or return a placeholder snippet."""
    catalog = code_catalog()
    template = catalog.templates.get(operation, {}).get(language)
    if template is None:
        return fallback_snippet(operation, language)

    auth = catalog.auth if include_auth else catalog.no_auth
    return Template(template).safe_substitute(
        auth_import=auth.import_,
        auth_setup=auth.setup,
        public_key=auth.public_key,
    ).rstrip("\n")


def generate_code(
    operation: str,
    language: str,
    include_auth: bool = False,
    full_example: bool = False,
) -> str:
    code = render_snippet(operation, language, include_auth)
    if full_example:
        code = code_catalog().full_example_setup.rstrip("\n") + "\n\n" + code

    return (
        "# DeSo Code Generator\n\n"
        f"**Operation:** {operation}  \n"
        f"**Language:** {language}  \n"
        f"**Include Auth:** {str(include_auth).lower()}\n\n"
        "## Generated Code:\n\n"
        f"```{language}\n{code}\n```\n"
    )
