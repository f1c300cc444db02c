"""opencode CLI provider.

Runs ``opencode run <prompt> --model <model>`` as a subprocess and returns
its stdout. The whole conversation is flattened into one prompt string.
"""

import subprocess
import time

from aicc.llm.base import BaseLLMProvider, ChatMessage, flatten_messages
from aicc.llm.exceptions import ProviderInvocationError, ProviderTimeoutError
from aicc.log import get_logger

logger = get_logger(__name__)

OPENCODE_BINARY = "opencode"


class OpenCodeProvider(BaseLLMProvider):
    """Model access through the opencode command line tool."""

    name = "opencode"

    def build_command(self, prompt: str) -> list[str]:
        return [OPENCODE_BINARY, "run", prompt, "--model", self.model]

    def chat(self, messages: list[ChatMessage], max_tokens: int) -> str:
        """Run opencode with the flattened prompt.

        ``max_tokens`` is not forwarded; opencode manages its own budget.

        Raises:
            ProviderTimeoutError: If opencode does not finish in time.
            ProviderInvocationError: If opencode is missing or fails.
        """
        command = self.build_command(flatten_messages(messages))
        started = time.monotonic()

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise ProviderTimeoutError(f"Model call timed out after {int(self.timeout * 1000)}ms")
        except FileNotFoundError:
            raise ProviderInvocationError(
                f"'{OPENCODE_BINARY}' was not found in PATH. Install it or choose another provider."
            )
        except OSError as e:
            raise ProviderInvocationError(f"Failed to invoke model: {e}")

        logger.debug("opencode finished in %.2fs (exit %s)", time.monotonic() - started, result.returncode)

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise ProviderInvocationError(f"Failed to invoke model (exit {result.returncode}): {detail}")

        return result.stdout
