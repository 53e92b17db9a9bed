"""Cipher configuration from the environment (and an optional .env file)."""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from stringcipher.common.errors import ConfigError
from stringcipher.common.protocol import CipherConfig, parse_config

logger = logging.getLogger(__name__)

KEY_ENV = 'STRING_CIPHER_KEY'
MODE_ENV = 'STRING_CIPHER_MODE'


def load_config(key: Optional[str] = None, mode: Optional[str] = None,
                env_file: Optional[str] = None) -> CipherConfig:
    """
    Resolve the cipher configuration.
    Precedence: explicit arguments, then environment / .env, then defaults.
    """
    # .env is looked up from the working directory, not this package.
    # Existing environment variables are not overridden by the file
    load_dotenv(env_file or find_dotenv(usecwd=True))

    env = {
        'key': os.getenv(KEY_ENV) or None,
        'mode': os.getenv(MODE_ENV) or None,
    }
    try:
        config = parse_config(env, key=key, mode=mode)
    except ValidationError as e:
        raise ConfigError(f"invalid cipher configuration: {e}") from e

    if config.uses_legacy_key:
        logger.warning(
            "%s is not set; falling back to the built-in legacy key. "
            "Ciphertexts are readable by anyone with this source.", KEY_ENV
        )
    logger.debug("Cipher configuration loaded (mode=%s)", config.mode)
    return config
