"""
Type Expression Rendering

Turns tree-sitter type (and default-value expression) subtrees back into
canonical text. Common type shapes get explicit layouts; everything else
falls back to a token join that drops comments and spaces tokens by their
kind (binary operators, braces, call parentheses), never by the gaps in the
source, so the same declaration always renders to the same string however
it was formatted.
"""

from typing import Optional

from tree_sitter import Node

# Nodes whose source text is kept verbatim, never split into tokens
ATOMIC_NODES = {"string", "template_string", "template_literal_type", "regex"}

NO_SPACE_AFTER = {"(", "[", ".", "?.", "..."}
NO_SPACE_BEFORE = {")", "]", ",", ".", "?.", ";"}

# (token, parent node type) pairs with no space before the token
TIGHT_OPENERS = {
    ("(", "arguments"),
    ("[", "subscript_expression"),
    ("<", "type_arguments"),
    ("<", "type_parameters"),
}
ANGLE_BRACKETED = {"type_arguments", "type_parameters"}
# `key: value` colons; ternaries and conditional types keep both spaces
TIGHT_COLON_PARENTS = {"pair", "pair_pattern", "type_annotation", "property_signature"}
OPTIONAL_MARKER_PARENTS = {"optional_parameter", "property_signature", "public_field_definition"}

ANNOTATION_MARKER = ": "


def node_text(node: Node) -> str:
    """Source text of a node."""
    return node.text.decode("utf-8") if node.text else ""


def named_children(node: Node) -> list[Node]:
    """Named children of a node, without comments."""
    return [child for child in node.named_children if child.type != "comment"]


class TypeRenderer:
    """Renders type expressions and default values to canonical text."""

    def render(self, node: Node) -> str:
        """Render a type node (or type annotation) to text."""
        handler = getattr(self, f"_render_{node.type}", None)
        if handler is not None:
            return handler(node)
        return self.render_tokens(node)

    def render_expression(self, node: Node) -> str:
        """Render an expression, e.g. a parameter default value."""
        return self.render_tokens(node)

    def render_annotation_type(self, annotation: Node) -> str:
        """Render a `: T` annotation and strip the marker, leaving `T`."""
        return self.render(annotation)[len(ANNOTATION_MARKER):]

    # --- Structured layouts ---

    def _render_type_annotation(self, node: Node) -> str:
        children = named_children(node)
        if not children:
            return ANNOTATION_MARKER
        return ANNOTATION_MARKER + self.render(children[0])

    def _render_union_type(self, node: Node) -> str:
        return " | ".join(self.render(child) for child in named_children(node))

    def _render_intersection_type(self, node: Node) -> str:
        return " & ".join(self.render(child) for child in named_children(node))

    def _render_array_type(self, node: Node) -> str:
        return self.render(named_children(node)[0]) + "[]"

    def _render_generic_type(self, node: Node) -> str:
        name = node.child_by_field_name("name")
        arguments = node.child_by_field_name("type_arguments")
        if name is None or arguments is None:
            return self.render_tokens(node)
        return self.render(name) + self.render(arguments)

    def _render_type_arguments(self, node: Node) -> str:
        return "<" + ", ".join(self.render(child) for child in named_children(node)) + ">"

    def _render_tuple_type(self, node: Node) -> str:
        return "[" + ", ".join(self.render(child) for child in named_children(node)) + "]"

    def _render_parenthesized_type(self, node: Node) -> str:
        return "(" + self.render(named_children(node)[0]) + ")"

    def _render_optional_type(self, node: Node) -> str:
        return self.render(named_children(node)[0]) + "?"

    def _render_rest_type(self, node: Node) -> str:
        return "..." + self.render(named_children(node)[0])

    def _render_index_type_query(self, node: Node) -> str:
        return "keyof " + self.render(named_children(node)[0])

    def _render_readonly_type(self, node: Node) -> str:
        return "readonly " + self.render(named_children(node)[0])

    def _render_lookup_type(self, node: Node) -> str:
        children = named_children(node)
        if len(children) != 2:
            return self.render_tokens(node)
        return f"{self.render(children[0])}[{self.render(children[1])}]"

    def _render_object_type(self, node: Node) -> str:
        members = [self.render(child) for child in named_children(node)]
        if not members:
            return "{}"
        return "{ " + "; ".join(members) + " }"

    def _render_property_signature(self, node: Node) -> str:
        name = node.child_by_field_name("name")
        if name is None:
            return self.render_tokens(node)

        parts = []
        for child in node.children:
            if child == name:
                break
            if not child.is_named or child.type == "accessibility_modifier":
                parts.append(node_text(child))
        parts.append(node_text(name))
        text = " ".join(parts)

        if any(child.type == "?" for child in node.children):
            text += "?"
        annotation = node.child_by_field_name("type")
        if annotation is not None:
            text += self.render(annotation)
        return text

    # --- Fallback ---

    def render_tokens(self, node: Node) -> str:
        """Join the leaf tokens of a node, spacing them by token kind."""
        tokens: list[Node] = []
        _collect_tokens(node, tokens)

        parts = []
        previous = None
        for token in tokens:
            if previous is not None and _needs_space(previous, token):
                parts.append(" ")
            parts.append(node_text(token))
            previous = token
        return "".join(parts)


def _collect_tokens(node: Node, tokens: list[Node]):
    if node.type == "comment":
        return
    if node.child_count == 0 or node.type in ATOMIC_NODES:
        tokens.append(node)
        return
    for child in node.children:
        _collect_tokens(child, tokens)


def _parent_type(node: Node) -> Optional[str]:
    return node.parent.type if node.parent is not None else None


def _needs_space(previous: Node, token: Node) -> bool:
    """Whether a single space separates two adjacent tokens."""
    prev_text = node_text(previous)
    text = node_text(token)
    prev_parent = _parent_type(previous)
    parent = _parent_type(token)

    if prev_text in NO_SPACE_AFTER or text in NO_SPACE_BEFORE:
        return False
    if prev_text == "{" and text == "}":
        return False
    # Call arguments, subscripts and type arguments hug what precedes them
    if (text, parent) in TIGHT_OPENERS:
        return False
    if text == "(" and parent == "formal_parameters" and previous.is_named:
        return False
    if prev_parent in ANGLE_BRACKETED and prev_text == "<":
        return False
    if parent in ANGLE_BRACKETED and text == ">":
        return False
    if text == ":" and parent in TIGHT_COLON_PARENTS:
        return False
    if text == "?" and parent in OPTIONAL_MARKER_PARENTS:
        return False
    if "update_expression" in (parent, prev_parent) and {text, prev_text} & {"++", "--"}:
        return False
    if parent == "non_null_expression" and text == "!":
        return False
    if prev_parent == "unary_expression" and not previous.is_named and not prev_text.isalpha():
        return False
    return True
