"""DeSo UI component registry browser."""
from __future__ import annotations

from typing import Callable

from .catalog import Component, ComponentRegistry, component_registry

MAX_SEARCH_RESULTS = 10

ACTIONS = (
    "explore",
    "install",
    "usage",
    "dependencies",
    "examples",
    "layouts",
    "categories",
    "search",
)


def pascal_case(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))


def _is_npm_package(dep: str) -> bool:
    return dep.startswith("react-") or "." in dep


def _not_found(name: str) -> str:
    return f'Component "{name}" not found. Use the \'search\' action to find similar components.'


def explore_all(registry: ComponentRegistry) -> str:
    response = (
        "# DeSo UI Component Library\n\n"
        "A React component library for building DeSo applications.\n\n"
        "**Built with:** TypeScript, Shadcn UI, Tailwind CSS, Storybook  \n"
        f"**Installation:** `{registry.install_command('[component]')}`\n\n"
        "## Component Overview\n\n"
    )
    total = 0
    for category_name, category in registry.categories.items():
        total += len(category.components)
        response += f"### {category_name.upper()} ({len(category.components)} components)\n"
        response += f"{category.description}\n\n"
        for info in category.components.values():
            response += f"- **{info.title}**: {info.description}\n"
        response += "\n"

    response += (
        "## Quick Start\n\n"
        "```bash\n"
        f"{registry.install_command('post-card')}\n"
        "```\n\n"
        f"**Total Components:** {total}\n"
    )
    return response


def explore_component(registry: ComponentRegistry, name: str, framework: str) -> str:
    found = registry.find(name)
    if found is None:
        return _not_found(name)
    category_name, info = found
    class_name = info.title.replace(" ", "")
    lang = "tsx" if framework == "react" else "javascript"

    response = (
        f"# {info.title}\n\n"
        f"**Category:** {category_name.upper()}  \n"
        f"**Component:** `{name}`\n\n"
        f"{info.description}\n\n"
        "## Installation\n\n"
        f"```bash\n{registry.install_command(name)}\n```\n\n"
        "## Dependencies\n\n"
    )
    if info.dependencies:
        response += "**Registry Dependencies:**\n"
        response += "".join(f"- {dep}\n" for dep in info.dependencies)
    else:
        response += "No additional dependencies required.\n"

    response += "\n## Props\n\n**Key Props:**\n"
    response += "".join(f"- `{prop}`\n" for prop in info.props)

    response += (
        f"\n## Usage Example ({framework})\n\n"
        f"```{lang}\n"
        f"import {{ {class_name} }} from '@/components/deso-ui/{name}';\n\n"
        "function MyComponent() {\n"
        f"  return <{class_name} />;\n"
        "}\n"
        "```\n\n"
        "## Examples\n\n"
    )
    response += "".join(f"- {example}\n" for example in info.examples)
    return response


def explore_category(registry: ComponentRegistry, category: str) -> str:
    info = registry.categories.get(category)
    if info is None:
        return f'Category "{category}" not found. Available: {", ".join(registry.categories)}'

    response = (
        f"# {category.upper()} Components\n\n"
        f"{info.description}\n\n"
        f"## Components ({len(info.components)})\n\n"
    )
    for name, component in info.components.items():
        response += (
            f"### {component.title} (`{name}`)\n\n"
            f"{component.description}\n\n"
            f"**Installation:** `{registry.install_command(name)}`\n\n"
            f"**Key Props:** {', '.join(component.props) or 'None'}\n\n"
            f"**Dependencies:** {', '.join(component.dependencies) or 'None'}\n\n"
            "---\n\n"
        )
    return response


def install_instructions(registry: ComponentRegistry, name: str) -> str:
    class_name = pascal_case(name)
    return (
        "# Installation Instructions\n\n"
        f"## Install {name}\n\n"
        f"```bash\n{registry.install_command(name)}\n```\n\n"
        "## Setup Dependencies\n\n"
        "```bash\nnpm install deso-protocol lucide-react class-variance-authority\n```\n\n"
        "## Usage\n\n"
        "```tsx\n"
        f"import {{ {class_name} }} from '@/components/deso-ui/{name}';\n\n"
        "export default function MyApp() {\n"
        f"  return <{class_name} />;\n"
        "}\n"
        "```\n\n"
        "## Additional Setup\n\n"
        "```tsx\n"
        "import { configure } from 'deso-protocol';\n\n"
        "configure({\n"
        "  nodeURI: 'https://node.deso.org',\n"
        "  identityURI: 'https://identity.deso.org'\n"
        "});\n"
        "```\n"
    )


def usage_examples(registry: ComponentRegistry, name: str, framework: str) -> str:
    found = registry.find(name)
    if found is None:
        return f'Component "{name}" not found.'
    _, info = found
    class_name = pascal_case(name)
    props = "\n".join(f"      {prop}={{{prop}}}" for prop in info.props[:4])

    return (
        f"# {info.title} Usage Examples\n\n"
        f"{info.description}\n\n"
        f"## Basic Usage ({framework})\n\n"
        "```tsx\n"
        f"import {{ {class_name} }} from '@/components/deso-ui/{name}';\n\n"
        "export function Example() {\n"
        "  return (\n"
        f"    <{class_name}\n{props}\n    />\n"
        "  );\n"
        "}\n"
        "```\n\n"
        "## Available Props\n\n"
        + "".join(f"- `{prop}`\n" for prop in info.props)
    )


def show_dependencies(registry: ComponentRegistry, name: str) -> str:
    found = registry.find(name)
    if found is None:
        return f'Component "{name}" not found.'
    _, info = found

    response = (
        f"# {info.title} Dependencies\n\n"
        "## Installation Order\n\n"
        "```bash\n"
        "# Install base component first\n"
        f"{registry.install_command(name)}\n"
    )
    if info.dependencies:
        response += "\n# Install dependencies\n"
        for dep in info.dependencies:
            if _is_npm_package(dep):
                response += f"npm install {dep}\n"
            else:
                response += f"{registry.install_command(dep)}\n"

    response += f"```\n\n## Dependency Tree\n\n```\n{name}\n"
    if info.dependencies:
        response += "".join(f"├── {dep}\n" for dep in info.dependencies)
    else:
        response += "└── (no dependencies)\n"
    response += "```\n\n## Component Imports\n\n```tsx\n"
    response += f"import {{ {info.title.replace(' ', '')} }} from '@/components/deso-ui/{name}';\n"
    for dep in info.dependencies:
        if not _is_npm_package(dep):
            response += f"// import {{ {pascal_case(dep)} }} from '@/components/deso-ui/{dep}';\n"
    response += "```\n"
    return response


def show_examples(registry: ComponentRegistry, name: str) -> str:
    found = registry.find(name)
    if found is None:
        return f'Component "{name}" not found.'
    _, info = found
    response = f"# {info.title} Examples\n\n{info.description}\n\n"
    if not info.examples:
        return response + "No examples listed for this component.\n"
    response += "".join(f"- {example}\n" for example in info.examples)
    response += f"\nStorybook stories for each example live in `deso-ui/src/components/{name}`.\n"
    return response


def show_layouts(registry: ComponentRegistry) -> str:
    response = (
        "# Complete Layout Examples\n\n"
        "Ready-to-use layout patterns combining multiple DeSo UI components.\n\n"
    )
    for layout in registry.layouts.values():
        response += (
            f"## {layout.title}\n\n"
            f"{layout.description}\n\n"
            f"**Layout:** {layout.layout}\n\n"
            "**Components Used:**\n"
        )
        response += "".join(f"- {c}\n" for c in layout.components)
        response += "\n**Installation:**\n```bash\n"
        response += "".join(f"{registry.install_command(c)}\n" for c in layout.components)
        response += "```\n\n"
    return response


def show_categories(registry: ComponentRegistry) -> str:
    response = (
        "# Component Categories\n\n"
        "Overview of all component categories in the DeSo UI library.\n\n"
    )
    for category_name, category in registry.categories.items():
        response += (
            f"## {category_name.upper()} ({len(category.components)} components)\n\n"
            f"{category.description}\n\n"
            "**Components:**\n"
        )
        for name, info in category.components.items():
            response += f"- `{name}` - {info.title}\n"
        response += f"\n**Install all {category_name} components:**\n```bash\n"
        response += "".join(f"{registry.install_command(name)}\n" for name in category.components)
        response += "```\n\n---\n\n"
    return response


def search_components(registry: ComponentRegistry, query: str) -> str:
    """Rank components by how often the query occurs in their name, title and description."""
    term = query.lower()
    results: list[tuple[int, str, str, Component]] = []
    for category_name, category in registry.categories.items():
        for name, info in category.components.items():
            text = f"{name} {info.title} {info.description}".lower()
            score = text.count(term)
            if score:
                results.append((score, category_name, name, info))

    if not results:
        return f'No components found matching "{query}".'

    results.sort(key=lambda r: r[0], reverse=True)
    response = f'# Search Results for "{query}"\n\nFound {len(results)} matching components:\n\n'
    for _, category_name, name, info in results[:MAX_SEARCH_RESULTS]:
        response += (
            f"## {info.title} (`{name}`)\n\n"
            f"**Category:** {category_name.upper()}  \n"
            f"**Description:** {info.description}  \n"
            f"**Install:** `{registry.install_command(name)}`\n\n"
            "---\n\n"
        )
    if len(results) > MAX_SEARCH_RESULTS:
        response += f"*Showing top {MAX_SEARCH_RESULTS} of {len(results)} results*"
    return response


def _requires(value: str | None, message: str, render: Callable[[str], str]) -> str:
    if not value:
        return message
    return render(value)


def ui_components(
    action: str,
    component: str | None = None,
    category: str | None = None,
    framework: str = "react",
    query: str | None = None,
) -> str:
    registry = component_registry()

    if action == "explore":
        if component:
            return explore_component(registry, component, framework)
        if category and category != "all":
            return explore_category(registry, category)
        return explore_all(registry)
    if action == "install":
        return _requires(
            component,
            "Please specify a component name for installation instructions.",
            lambda name: install_instructions(registry, name),
        )
    if action == "usage":
        return _requires(
            component,
            "Please specify a component name for usage examples.",
            lambda name: usage_examples(registry, name, framework),
        )
    if action == "dependencies":
        return _requires(
            component,
            "Please specify a component name to show dependencies.",
            lambda name: show_dependencies(registry, name),
        )
    if action == "examples":
        return _requires(
            component,
            "Please specify a component name to show examples.",
            lambda name: show_examples(registry, name),
        )
    if action == "layouts":
        return show_layouts(registry)
    if action == "categories":
        return show_categories(registry)
    if action == "search":
        return _requires(
            query,
            "Please provide a search query.",
            lambda q: search_components(registry, q),
        )
    return f"Unknown action: {action}. Available: {', '.join(ACTIONS)}"
