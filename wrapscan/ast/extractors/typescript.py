"""
TypeScript Wrapper Extractor

Extracts contract wrapper metadata from TypeScript sources using tree-sitter.
A wrapper looks like:

    export type CounterConfig = {
        owner: Address;
        seed?: number;
    };

    export class Counter implements Contract {
        static createFromAddress(address: Address) { ... }
        static createFromConfig(config: CounterConfig, code: Cell) { ... }
        async sendIncrease(provider: ContractProvider, via: Sender, by: bigint) { ... }
        async getCounter(provider: ContractProvider): Promise<bigint> { ... }
    }
"""

from typing import Optional

from tree_sitter import Node, Tree

from logging_config import get_logger
from wrapscan.ast.extractors.base import LanguageExtractor, register_extractor
from wrapscan.ast.models import (
    ConfigFieldInfo,
    ConfigTypeInfo,
    ParameterInfo,
    ParameterSet,
    WrapperScan,
)
from wrapscan.ast.render import TypeRenderer, named_children
from wrapscan.config import (
    CONFIG_SUFFIX,
    CONTRACT_INTERFACE,
    CREATE_FROM_ADDRESS,
    CREATE_FROM_CONFIG,
    GET_PREFIX,
    PROVIDER_PARAM,
    SEND_PREFIX,
    UNTYPED_PARAMETER,
    VIA_PARAM,
)

logger = get_logger("ast.typescript")

CLASS_DECLARATIONS = {"class_declaration", "abstract_class_declaration"}
TYPE_ALIAS = "type_alias_declaration"
PARAMETER_TYPES = {"required_parameter", "optional_parameter"}

# Accessor keywords; such members are not plain methods
ACCESSOR_KEYWORDS = {"get", "set"}


class TypeScriptExtractor(LanguageExtractor):
    """Extracts wrapper metadata from TypeScript source files."""

    def __init__(self):
        self.renderer = TypeRenderer()

    @property
    def language(self) -> str:
        return "typescript"

    def scan(self, tree: Tree, class_name: str) -> WrapperScan:
        """Walk the tree once, collecting the config type and the wrapper class."""
        result = WrapperScan(class_name=class_name)
        config_name = class_name + CONFIG_SUFFIX

        for node in self.walk_tree(tree.root_node, CLASS_DECLARATIONS | {TYPE_ALIAS}):
            if node.type == TYPE_ALIAS:
                if not self._is_config_alias(node, config_name):
                    continue
                if result.config_type is not None:
                    logger.warning(f"Ignoring duplicate {config_name} declaration")
                    continue
                result.config_type = self.extract_config_type(node)
            elif self.is_wrapper_class(node, class_name):
                if result.class_found:
                    logger.warning(f"Ignoring duplicate wrapper class {class_name}")
                    continue
                result.class_found = True
                self.scan_class_body(node, result)

        if not result.class_found:
            logger.debug(f"No class {class_name} implementing {CONTRACT_INTERFACE} found")
        return result

    # --- Config type ---

    def _is_config_alias(self, node: Node, config_name: str) -> bool:
        """Top-level `type <Class>Config = { ... }`, exported or not."""
        parent = node.parent
        if parent is not None and parent.type == "export_statement":
            parent = parent.parent
        if parent is None or parent.type != "program":
            return False

        name = node.child_by_field_name("name")
        value = node.child_by_field_name("value")
        return (
            name is not None
            and self.get_node_text(name) == config_name
            and value is not None
            and value.type == "object_type"
        )

    def extract_config_type(self, node: Node) -> ConfigTypeInfo:
        """Extract fields from a config type alias whose value is an object type."""
        config_type: ConfigTypeInfo = {}
        value = node.child_by_field_name("value")

        for member in named_children(value):
            if member.type != "property_signature":
                continue
            name = member.child_by_field_name("name")
            annotation = member.child_by_field_name("type")
            if name is None or name.type != "property_identifier" or annotation is None:
                continue

            type_nodes = named_children(annotation)
            if not type_nodes:
                continue
            type_node = type_nodes[0]
            if type_node.type == "type_identifier":
                field_type = self.get_node_text(type_node)
            else:
                field_type = self.renderer.render(type_node)

            config_type[self.get_node_text(name)] = ConfigFieldInfo(
                field_type=field_type,
                optional=True if self.find_child(member, "?") else None,
            )

        return config_type

    # --- Wrapper class ---

    def is_wrapper_class(self, node: Node, class_name: str) -> bool:
        """Named class_name and implementing exactly one interface, Contract."""
        name = node.child_by_field_name("name")
        if name is None or self.get_node_text(name) != class_name:
            return False

        heritage = self.find_child(node, "class_heritage")
        if heritage is None:
            return False
        implements = self.find_child(heritage, "implements_clause")
        if implements is None:
            return False

        interfaces = named_children(implements)
        return len(interfaces) == 1 and self._interface_head(interfaces[0]) == CONTRACT_INTERFACE

    def _interface_head(self, node: Node) -> Optional[str]:
        if node.type == "generic_type":
            node = node.child_by_field_name("name")
        if node is None or node.type != "type_identifier":
            return None
        return self.get_node_text(node)

    def scan_class_body(self, node: Node, result: WrapperScan) -> None:
        """Record operations and static factories declared directly in the class body."""
        body = node.child_by_field_name("body")
        if body is None:
            return

        for member in named_children(body):
            if member.type != "method_definition":
                continue
            name_node = member.child_by_field_name("name")
            if name_node is None or name_node.type != "property_identifier":
                continue
            name = self.get_node_text(name_node)
            modifiers = self._method_modifiers(member, name_node)
            if modifiers & ACCESSOR_KEYWORDS or name == "constructor":
                continue

            if "async" in modifiers and name.startswith(GET_PREFIX):
                result.get_functions[name] = self.extract_parameters(member, is_send=False)
            elif "async" in modifiers and name.startswith(SEND_PREFIX):
                result.send_functions[name] = self.extract_parameters(member, is_send=True)
            elif "static" in modifiers:
                if name == CREATE_FROM_CONFIG:
                    result.can_be_created_from_config = True
                if name == CREATE_FROM_ADDRESS:
                    result.can_be_created_from_address = True

    def _method_modifiers(self, method: Node, name_node: Node) -> set[str]:
        """Keyword tokens (static, async, get, set, ...) preceding the method name."""
        modifiers = set()
        for child in method.children:
            if child == name_node:
                break
            if not child.is_named:
                modifiers.add(child.type)
        return modifiers

    # --- Operations ---

    def extract_parameters(self, method: Node, is_send: bool) -> ParameterSet:
        """
        Extract the user-facing parameters of a send/get method.

        `provider` is injected into every operation and `via` (the signer)
        into send operations, so neither is reported there.
        """
        parameters: ParameterSet = {}
        params_node = method.child_by_field_name("parameters")
        if params_node is None:
            return parameters

        for param in named_children(params_node):
            if param.type not in PARAMETER_TYPES:
                continue
            pattern = param.child_by_field_name("pattern")
            if pattern is None or pattern.type != "identifier":
                logger.debug(f"Skipping unnamed parameter {self.get_node_text(param)!r}")
                continue

            name = self.get_node_text(pattern)
            if name == PROVIDER_PARAM or (is_send and name == VIA_PARAM):
                continue

            annotation = param.child_by_field_name("type")
            value = param.child_by_field_name("value")
            parameters[name] = ParameterInfo(
                type=(
                    self.renderer.render_annotation_type(annotation)
                    if annotation is not None
                    else UNTYPED_PARAMETER
                ),
                default_value=self.renderer.render_expression(value) if value is not None else None,
                optional=True if param.type == "optional_parameter" else None,
            )

        return parameters


class TsxExtractor(TypeScriptExtractor):
    """Same extraction over the TSX grammar."""

    @property
    def language(self) -> str:
        return "tsx"


# Register the extractors
register_extractor(TypeScriptExtractor())
register_extractor(TsxExtractor())
