"""DeSo API reference rendering."""
from __future__ import annotations

from .catalog import Endpoint, api_catalog


def _param_list(params: list[str]) -> str:
    return ", ".join(params) or "None"


def endpoint_example(endpoint: Endpoint) -> str:
    """Render SDK and raw HTTP examples for an endpoint."""
    sdk_args = ",\n  ".join(f"{p}: 'value'" for p in endpoint.required)
    body_args = ",\n    ".join(f"{p}: 'value'" for p in endpoint.required)
    return f"""
## Code Examples

### Using deso-js SDK
```javascript
import {{ {endpoint.sdk_function} }} from 'deso-protocol';

const result = await {endpoint.sdk_function}({{
  {sdk_args}
}});
```

### Direct API Call
```javascript
const response = await fetch('https://node.deso.org{endpoint.url}', {{
  method: '{endpoint.method}',
  headers: {{ 'Content-Type': 'application/json' }},
  body: JSON.stringify({{
    {body_args}
  }})
}});
```
"""


def explore_api(category: str = "all", endpoint: str | None = None, include_code: bool = False) -> str:
    """Describe one endpoint, one category, or the whole API catalog."""
    catalog = api_catalog()

    if endpoint:
        found = catalog.find_endpoint(endpoint)
        if found is None:
            return f'Endpoint "{endpoint}" not found'
        category_name, info, ep = found
        lines = [
            f"# {endpoint}",
            "",
            f"**Category:** {category_name.upper()}",
            f"**Description:** {ep.description}",
            "",
            "**API Details:**",
            f"- Method: {ep.method}",
            f"- URL: {ep.url}",
            f"- Backend Handler: {ep.handler}",
            f"- Backend File: {info.backend_file}",
            f"- deso-js Function: {ep.sdk_function}",
            "",
            "**Parameters:**",
            f"- Required: {_param_list(ep.required)}",
            f"- Optional: {_param_list(ep.optional)}",
            "",
        ]
        if ep.deprecated:
            lines.insert(4, "**Status:** DEPRECATED")
        result = "\n".join(lines)
        if include_code:
            result += endpoint_example(ep)
        return result

    if category == "all":
        result = "# Complete DeSo API Reference\n\n"
        for name, info in catalog.categories.items():
            result += f"## {name.upper()} APIs\n"
            result += f"{info.description}\n"
            result += f"**Backend:** {info.backend_file}\n\n"
            for ep_name, details in info.endpoints.items():
                result += f"### {ep_name}\n"
                result += f"{details.description}\n"
                result += f"- {details.method} {details.url}\n"
                result += f"- deso-js: {details.sdk_function}\n\n"
        return result

    info = catalog.categories.get(category)
    if info is None:
        available = ", ".join(["all", *catalog.categories])
        return f"Unknown category: {category}. Available: {available}"

    result = f"# {category.upper()} APIs\n\n"
    result += f"{info.description}\n\n"
    result += f"**Backend Implementation:** {info.backend_file}\n\n"
    for ep_name, details in info.endpoints.items():
        result += f"## {ep_name}\n"
        result += f"{details.description}\n\n"
        result += f"**API:** {details.method} {details.url}\n"
        result += f"**Handler:** {details.handler}\n"
        result += f"**deso-js:** {details.sdk_function}\n\n"
        result += f"**Required Params:** {_param_list(details.required)}\n"
        result += f"**Optional Params:** {_param_list(details.optional)}\n\n"
        if include_code:
            result += endpoint_example(details)

    if info.documentation:
        result += "## Documentation\n"
        for kind, paths in info.documentation.items():
            result += f"- **{kind}:** {', '.join(paths)}\n"

    return result
