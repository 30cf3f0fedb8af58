"""
Shared fixtures for the ihexkit test suite.
"""

import pytest

from ihexkit.config import set_default_config


EXAMPLE_LINES = [
    ":10010000214601360121470136007EFE09D2190140",
    ":100110002146017E17C20001FF5F16002148011928",
    ":10012000194E79234623965778239EDA3F01B2CAA7",
    ":100130003F0156702B5E712B722B732146013421C7",
    ":00000001FF",
]


@pytest.fixture(autouse=True)
def reset_default_config():
    """Make every test read configuration from its own environment."""
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def example_hex_text() -> str:
    """
    A small canonical Intel HEX document.

    Four 16-byte data records at 0x0100-0x013F followed by End Of File.
    """
    return "\n".join(EXAMPLE_LINES)


@pytest.fixture
def example_hex_file(tmp_path, example_hex_text: str):
    """The example document written to a temporary .hex file."""
    path = tmp_path / "example.hex"
    path.write_bytes(example_hex_text.encode("ascii"))
    return path


@pytest.fixture
def nice_line() -> str:
    """A data record whose payload spells './_nice_'."""
    return ":08A455002E2F5F6E6963655F45"
