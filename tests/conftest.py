"""
Pytest fixtures for wrapscan tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


FOO_WRAPPER = """
import { Address, beginCell, Cell, Contract, contractAddress, ContractProvider, Sender } from '@ton/core';

export type FooConfig = {
    owner: Address;
    seed?: number;
};

export class Foo implements Contract {
    constructor(readonly address: Address) {}

    static createFromAddress(address: Address) {
        return new Foo(address);
    }

    static createFromConfig(config: FooConfig, code: Cell, workchain = 0) {
        const data = beginCell().storeAddress(config.owner).endCell();
        return new Foo(contractAddress(workchain, { code, data }));
    }

    async sendDeploy(provider: ContractProvider, via: Sender, value: bigint) {
        await provider.internal(via, { value, body: beginCell().endCell() });
    }

    async getData(provider: ContractProvider): Promise<number> {
        const result = await provider.get('get_data', []);
        return result.stack.readNumber();
    }
}
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def foo_source() -> str:
    """Source of a complete Foo wrapper."""
    return FOO_WRAPPER


@pytest.fixture
def foo_wrapper_file(temp_dir: Path) -> Path:
    """Write the Foo wrapper to <temp_dir>/wrappers/Foo.ts."""
    wrappers = temp_dir / "wrappers"
    wrappers.mkdir()
    file_path = wrappers / "Foo.ts"
    file_path.write_text(FOO_WRAPPER)
    return file_path


@pytest.fixture
def build_dir(temp_dir: Path) -> Path:
    """Create an empty build directory for compiled artifacts."""
    path = temp_dir / "build"
    path.mkdir()
    return path
