"""
Wrapper Metadata Assembly

Entry point for describing a contract wrapper class:

    info = await parse_wrapper("/work/app/wrappers/Counter.ts", "Counter")
    info.to_dict()
    # {"sendFunctions": {...}, "getFunctions": {...}, "path": "./wrappers/Counter.ts",
    #  "canBeCreatedFromConfig": True, "codeHex": "b5ee...", "configType": {...}}

Reading the file and looking up compiled code are the only awaits; the
analysis in between is synchronous.
"""

import asyncio
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

from logging_config import get_logger
from wrapscan.artifacts import ArtifactStore, CompiledArtifactStore, lookup_optional
from wrapscan.ast.extractors import get_extractor
from wrapscan.ast.models import WrapperInfo, WrapperScan
from wrapscan.ast.parser import DEFAULT_LANGUAGE, ASTParser, get_parser
from wrapscan.config import CREATE_FROM_ADDRESS
from wrapscan.exceptions import MissingCapabilityError
from wrapscan.sources import FileReader, LocalFileReader, PathNormalizer, ProjectPathNormalizer

logger = get_logger("wrapper")

PathLike = Union[str, Path]


def scan_source(
    source: str,
    class_name: str,
    language: str = DEFAULT_LANGUAGE,
    parser: Optional[ASTParser] = None,
) -> WrapperScan:
    """
    Parse wrapper source and collect metadata for one class.

    Args:
        source: TypeScript source text
        class_name: Wrapper class to describe
        language: Grammar to parse with (typescript, tsx)
        parser: Parser to use, defaults to the shared instance

    Returns:
        WrapperScan with operations, config type and capability flags

    Raises:
        SourceSyntaxError: If the source does not parse
    """
    parser = parser or get_parser()
    tree = parser.parse(source, language)

    extractor = get_extractor(language)
    if extractor is None:
        raise ValueError(f"No extractor registered for {language}")
    return extractor.scan(tree, class_name)


def assemble_wrapper_info(
    scan: WrapperScan,
    path: str,
    code_hex: Optional[str] = None,
) -> WrapperInfo:
    """
    Freeze a scan into the WrapperInfo handed to binding generators.

    Raises:
        MissingCapabilityError: If the class has no static createFromAddress
    """
    if not scan.can_be_created_from_address:
        raise MissingCapabilityError(scan.class_name, CREATE_FROM_ADDRESS)

    config_type = dict(scan.config_type) if scan.config_type is not None else None
    return WrapperInfo(
        send_functions={name: dict(params) for name, params in scan.send_functions.items()},
        get_functions={name: dict(params) for name, params in scan.get_functions.items()},
        path=path,
        can_be_created_from_config=scan.can_be_created_from_config,
        code_hex=code_hex if scan.can_be_created_from_config else None,
        config_type=config_type,
    )


async def parse_wrapper(
    file_path: PathLike,
    class_name: str,
    *,
    reader: Optional[FileReader] = None,
    artifact_store: Optional[ArtifactStore] = None,
    normalizer: Optional[PathNormalizer] = None,
    parser: Optional[ASTParser] = None,
) -> WrapperInfo:
    """
    Describe the wrapper class `class_name` defined in `file_path`.

    Args:
        file_path: Wrapper source file
        class_name: Wrapper class to describe
        reader: Source reader, defaults to the local filesystem
        artifact_store: Compiled code lookup, defaults to the build directory
        normalizer: Path rewriter, defaults to the project root
        parser: Parser to use, defaults to the shared instance

    Returns:
        Frozen WrapperInfo

    Raises:
        SourceReadError: If the file cannot be read
        SourceSyntaxError: If the file is not valid TypeScript
        MissingCapabilityError: If the class has no static createFromAddress
    """
    file_path = str(file_path)
    reader = reader or LocalFileReader()
    parser = parser or get_parser()

    source = await reader.read(file_path)
    scan = scan_source(source, class_name, parser.detect_language(file_path), parser)
    if not scan.can_be_created_from_address:
        raise MissingCapabilityError(class_name, CREATE_FROM_ADDRESS)

    code_hex = None
    if scan.can_be_created_from_config:
        code_hex = await lookup_optional(artifact_store or CompiledArtifactStore(), class_name)

    path = (normalizer or ProjectPathNormalizer()).normalize(file_path)
    info = assemble_wrapper_info(scan, path, code_hex)
    logger.info(
        f"Parsed wrapper {class_name} from {path}: "
        f"{len(info.send_functions)} send, {len(info.get_functions)} get operations"
    )
    return info


async def parse_wrappers(
    targets: Iterable[tuple[PathLike, str]],
    **collaborators,
) -> list[WrapperInfo]:
    """
    Describe several wrappers concurrently.

    Args:
        targets: (file_path, class_name) pairs
        **collaborators: Passed through to parse_wrapper

    Returns:
        WrapperInfo per target, in input order
    """
    return await asyncio.gather(
        *(parse_wrapper(path, class_name, **collaborators) for path, class_name in targets)
    )
