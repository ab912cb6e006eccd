"""GraphQL query templates, schema notes and question-to-query building."""
from __future__ import annotations

import json
import re

from .catalog import BuildRule, GraphQLCatalog, graphql_catalog

ACTIONS = ("query", "schema", "examples", "build", "explain")
PLACEHOLDER_USERNAME = "YOUR_USERNAME_HERE"

_USERNAME_RE = re.compile(r"\b(\w+)\s+have")

COMMON_PATTERNS = """

## Common Patterns

**Pagination:**
```graphql
{
  accounts(first: 10, after: "cursor") {
    nodes { ... }
    pageInfo {
      hasNextPage
      endCursor
    }
    totalCount
  }
}
```

**Ordering:**
```graphql
{
  posts(orderBy: [TIMESTAMP_DESC]) {
    nodes { ... }
  }
}
```"""

OPTIMIZATION_TIPS = """
## Tips for Optimization

1. **Use pagination**: Always include `first` parameter to limit results
2. **Request only needed fields**: Don't fetch unnecessary data
3. **Use totalCount**: For counts, use `totalCount` instead of fetching all records
4. **Case-insensitive search**: Use `equalToInsensitive` for username lookups
5. **Proper ordering**: Use appropriate `orderBy` for your use case
"""


def fetch_snippet(endpoint: str, query: str, variables: str, log_expr: str = "data") -> str:
    escaped = query.replace("`", "\\`")
    return (
        "```javascript\n"
        f"const query = `{escaped}`;\n"
        f"const variables = {variables};\n\n"
        f"const response = await fetch('{endpoint}', {{\n"
        "  method: 'POST',\n"
        "  headers: { 'Content-Type': 'application/json' },\n"
        "  body: JSON.stringify({ query, variables })\n"
        "});\n\n"
        "const data = await response.json();\n"
        f"console.log({log_expr});\n"
        "```"
    )


def build_query(catalog: GraphQLCatalog, query_type: str | None, username: str | None) -> str:
    template = catalog.queries.get(query_type) if query_type else None
    if template is None:
        return f"Available query types: {', '.join(catalog.queries)}"

    params = {"username": username or PLACEHOLDER_USERNAME}
    if template.paginated:
        params["first"] = 10
    variables = json.dumps(params)
    subject = username or "a specific user"

    response = (
        f"# {template.title}\n\n{template.description}\n\n"
        f"## GraphQL Query\n\n```graphql\n{template.query}\n```\n\n"
        f"## Variables\n\n```json\n{variables}\n```\n\n"
        "## Usage Example\n\n"
        f"{template.example} {subject}:\n\n"
        + fetch_snippet(catalog.endpoint, template.query, variables)
    )
    if query_type in ("followers", "following"):
        response += (
            "\n\n## Tips\n\n"
            f"- Use `totalCount` to get the exact number of {query_type}\n"
            "- Adjust `first` parameter to get more/fewer results\n"
            f"- Use `orderBy: [PRIMARY_KEY_DESC]` for most recent {query_type}"
        )
    return response


def explore_schema(catalog: GraphQLCatalog, query_type: str | None) -> str:
    schema = catalog.schemas.get(query_type or "user", catalog.schemas["user"])
    return (
        f"# DeSo GraphQL Schema: {schema.title}\n\n{schema.description}\n\n"
        f"## Fields\n{schema.fields}\n\n## Filtering\n{schema.filters}"
        + COMMON_PATTERNS
    )


def query_examples(catalog: GraphQLCatalog, query_type: str | None) -> str:
    examples = catalog.examples.get(query_type or "user", catalog.examples["user"])
    response = f"# GraphQL Examples: {query_type or 'user'}\n\n"
    for index, example in enumerate(examples, start=1):
        response += (
            f"## {index}. {example.title}\n\n{example.description}\n\n"
            f"```graphql\n{example.query}\n```\n\n"
        )
    response += "## Usage with JavaScript\n\n"
    response += fetch_snippet(catalog.endpoint, "...", '{ username: "nader" }', "data.data")
    return response


def select_rule(catalog: GraphQLCatalog, question: str) -> BuildRule:
    """First rule whose keywords match the lowercased question, else the default."""
    lowered = question.lower()
    for rule in catalog.build_rules:
        if rule.matches(lowered):
            return rule
    return catalog.default_rule


def username_from_question(question: str) -> str | None:
    match = _USERNAME_RE.search(question.lower())
    return match.group(1) if match else None


def build_from_question(catalog: GraphQLCatalog, question: str | None, username: str | None) -> str:
    if not question:
        return (
            "Please provide a question to convert to GraphQL. "
            "Example: 'How many followers does nader have?'"
        )

    rule = select_rule(catalog, question)
    target = username or username_from_question(question) or PLACEHOLDER_USERNAME
    variables = json.dumps({"username": target})

    response = (
        f'# GraphQL Query for: "{question}"\n\n{rule.explanation}\n\n'
        f"## Generated Query\n\n```graphql\n{rule.query}\n```\n\n"
        f"## Variables\n\n```json\n{variables}\n```\n\n"
        "## Complete Example\n\n"
        + fetch_snippet(catalog.endpoint, rule.query, variables, "data.data.accounts.nodes[0]")
    )
    if target == PLACEHOLDER_USERNAME:
        response += (
            f'\n\n**Note:** Replace "{PLACEHOLDER_USERNAME}" with the actual '
            "username you want to query."
        )
    return response


def explain_query(catalog: GraphQLCatalog, custom_query: str | None) -> str:
    if not custom_query:
        return "Please provide a GraphQL query to explain."

    response = f"# GraphQL Query Explanation\n\n## Your Query\n\n```graphql\n{custom_query}\n```\n\n## Analysis\n\n"
    for needle, text in catalog.explain_features:
        if needle in custom_query:
            response += f"- {text}\n"

    if "username" in custom_query and "equalToInsensitive" in custom_query:
        response += (
            "\n## Pattern Detected: User Lookup\n"
            "This query is looking up a user by username (case-insensitive).\n"
        )
    if "followers" in custom_query or "following" in custom_query:
        response += (
            "\n## Pattern Detected: Social Relationships\n"
            "This query is examining follower/following relationships.\n"
        )
    if "TIMESTAMP_DESC" in custom_query:
        response += (
            "\n## Pattern Detected: Recent Content\n"
            "This query is ordering by timestamp to get the most recent items first.\n"
        )

    response += OPTIMIZATION_TIPS
    response += "\n## Execution\n\n"
    response += fetch_snippet(catalog.endpoint, custom_query, "{}")
    return response


def graphql_helper(
    action: str,
    query_type: str | None = None,
    username: str | None = None,
    public_key: str | None = None,
    question: str | None = None,
    custom_query: str | None = None,
) -> str:
    """Dispatch a GraphQL helper action.

    ``public_key`` is accepted for the tool interface; every template looks
    users up by username.
    """
    catalog = graphql_catalog()
    if action == "query":
        return build_query(catalog, query_type, username)
    if action == "schema":
        return explore_schema(catalog, query_type)
    if action == "examples":
        return query_examples(catalog, query_type)
    if action == "build":
        return build_from_question(catalog, question, username)
    if action == "explain":
        return explain_query(catalog, custom_query)
    return f"Unknown GraphQL action: {action}. Available: {', '.join(ACTIONS)}"
