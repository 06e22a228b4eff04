from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_CU_URL = "https://cu.ao-testnet.xyz"
CONNECT_TIMEOUT = 5
READ_TIMEOUT = 30


@dataclass(frozen=True)
class AoConfig:
    """Connection settings of an ao compute unit (CU).

    Attributes:
        cu_url (str): Base URL of the compute unit, without trailing slash.
        connect_timeout (float): Seconds to wait for the TCP connection.
        read_timeout (float): Seconds to wait for the response.
    """

    cu_url: str = DEFAULT_CU_URL
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT

    def __post_init__(self) -> None:
        # Raise: $cu_url must be an http(s) URL
        if not self.cu_url.startswith(("http://", "https://")):
            raise ValueError(f"$cu_url must start with http:// or https://, but provided value is: '{self.cu_url}'")
        object.__setattr__(self, "cu_url", self.cu_url.rstrip("/"))

        # Raise: timeouts must be positive
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError(f"Timeouts must be positive, but $connect_timeout = {self.connect_timeout} and $read_timeout = {self.read_timeout}")


def load_ao_config() -> AoConfig:
    """Build AoConfig from the environment (a .env file is loaded first).

    Reads `AO_CU_URL`, `AO_CONNECT_TIMEOUT` and `AO_READ_TIMEOUT`; missing values
    fall back to the defaults.
    """
    load_dotenv()
    return AoConfig(
        cu_url=os.environ.get("AO_CU_URL", DEFAULT_CU_URL),
        connect_timeout=float(os.environ.get("AO_CONNECT_TIMEOUT", CONNECT_TIMEOUT)),
        read_timeout=float(os.environ.get("AO_READ_TIMEOUT", READ_TIMEOUT)),
    )
