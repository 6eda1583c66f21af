"""Registry of built-in function documentation and its Markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "ParameterDoc",
    "ExampleDoc",
    "FunctionDoc",
    "register_documentation",
    "get_documentation",
    "get_documentation_by_category",
    "all_documentation",
    "format_function_doc",
    "format_function_list",
    "show_function_doc",
    "list_functions",
]


@dataclass(frozen=True)
class ParameterDoc:
    """One parameter of a documented function."""

    name: str
    type: str
    description: str
    optional: bool = False


@dataclass(frozen=True)
class ExampleDoc:
    """A usage example: a command run on an optional initial buffer."""

    description: str
    input: str
    output: str
    buffer: str = ""


@dataclass(frozen=True)
class FunctionDoc:
    """Documentation for one built-in function."""

    name: str
    summary: str
    description: str = ""
    category: str = ""
    parameters: tuple[ParameterDoc, ...] = field(default_factory=tuple)
    examples: tuple[ExampleDoc, ...] = field(default_factory=tuple)
    see_also: tuple[str, ...] = field(default_factory=tuple)


_REGISTRY: dict[str, FunctionDoc] = {}


def register_documentation(doc: FunctionDoc) -> None:
    """Add or replace the documentation for ``doc.name``."""
    _REGISTRY[doc.name] = doc


def get_documentation(name: str) -> FunctionDoc | None:
    """Return the documentation for ``name``, or None if there is none."""
    return _REGISTRY.get(name)


def get_documentation_by_category(category: str) -> list[FunctionDoc]:
    """Return all documentation in ``category``, sorted by function name."""
    return sorted(
        (doc for doc in _REGISTRY.values() if doc.category == category),
        key=lambda doc: doc.name,
    )


def all_documentation() -> list[FunctionDoc]:
    """Return all registered documentation, sorted by function name."""
    return sorted(_REGISTRY.values(), key=lambda doc: doc.name)


def format_function_doc(doc: FunctionDoc) -> str:
    """Render detailed Markdown documentation for one function."""
    parts = [f"# {doc.name}\n\n", f"**{doc.summary}**\n\n"]

    if doc.description:
        parts.append(f"## Description\n\n{doc.description}\n\n")

    if doc.parameters:
        parts.append("## Parameters\n\n")
        for param in doc.parameters:
            optional = " (optional)" if param.optional else ""
            parts.append(
                f"- **{param.name}** ({param.type}){optional}: {param.description}\n"
            )
        parts.append("\n")

    if doc.examples:
        parts.append("## Examples\n\n")
        for index, example in enumerate(doc.examples):
            if index > 0:
                parts.append("\n")
            parts.append(f"### {example.description}\n\n")
            if example.buffer:
                parts.append(f"**Initial buffer:**\n```\n{example.buffer}\n```\n\n")
            parts.append(f"**Command:**\n```\n{example.input}\n```\n\n")
            parts.append(f"**Result:**\n{example.output}\n")
        parts.append("\n")

    if doc.category:
        parts.append(f"## Category\n\n{doc.category}\n\n")

    if doc.see_also:
        parts.append("## See Also\n\n")
        parts.extend(f"- {related}\n" for related in doc.see_also)
        parts.append("\n")

    return "".join(parts)


def _title(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def format_function_list(docs: list[FunctionDoc], category: str = "", verbose: bool = False) -> str:
    """Render a list of functions, grouped by category when verbose."""
    if not docs:
        return "No documented functions found.\n"

    if category:
        parts = [f"Functions in category '{category}':\n\n"]
    else:
        parts = [f"Available functions ({len(docs)} total):\n\n"]

    if verbose:
        groups: dict[str, list[FunctionDoc]] = {}
        for doc in docs:
            groups.setdefault(doc.category or "other", []).append(doc)
        for name, group in groups.items():
            parts.append(f"## {_title(name)}\n\n")
            parts.extend(f"- **{doc.name}**: {doc.summary}\n" for doc in group)
            parts.append("\n")
    else:
        parts.extend(f"  {doc.name}\n" for doc in docs)
        parts.append("\nUse 'texted doc <function-name>' for detailed documentation.\n")
        parts.append("Use 'texted doc --verbose' to see function summaries.\n")

    return "".join(parts)


def show_function_doc(name: str) -> None:
    """Print detailed documentation for ``name``; raise LookupError if unknown."""
    doc = get_documentation(name)
    if doc is None:
        raise LookupError(f"no documentation found for function: {name}")
    print(format_function_doc(doc), end="")


def list_functions(category: str = "", verbose: bool = False) -> None:
    """Print the list of documented functions, optionally for one category."""
    if category:
        docs = get_documentation_by_category(category)
        if not docs:
            raise LookupError(f"no functions found in category: {category}")
    else:
        docs = all_documentation()
    print(format_function_list(docs, category, verbose), end="")