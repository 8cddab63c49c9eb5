"""
Wrapscan Configuration

Central configuration for wrapper conventions and environment defaults.
"""

import os
from pathlib import Path

# --- Wrapper Conventions ---

# The single interface a wrapper class must implement
CONTRACT_INTERFACE = "Contract"

# Operation name prefixes
SEND_PREFIX = "send"
GET_PREFIX = "get"

# Static factories recorded as capabilities
CREATE_FROM_CONFIG = "createFromConfig"
CREATE_FROM_ADDRESS = "createFromAddress"

# Parameters injected by the runtime, never part of user input
PROVIDER_PARAM = "provider"
VIA_PARAM = "via"  # signer, only injected into send operations

# `export type FooConfig = {...}` accompanies `class Foo`
CONFIG_SUFFIX = "Config"

# Type reported for parameters without an annotation
UNTYPED_PARAMETER = "any"

# --- Build Artifacts ---

COMPILED_SUFFIX = ".compiled.json"
COMPILED_HEX_KEY = "hex"
DEFAULT_BUILD_DIR_NAME = "build"


def get_project_root() -> Path:
    """Get the project root that reported paths are relative to."""
    env_path = os.environ.get("WRAPSCAN_PROJECT_ROOT")
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd()


def get_build_dir() -> Path:
    """Get the directory holding compiled contract artifacts."""
    env_path = os.environ.get("WRAPSCAN_BUILD_DIR")
    if env_path:
        return Path(env_path).expanduser()
    return get_project_root() / DEFAULT_BUILD_DIR_NAME
