"""Router configuration.

One frozen dataclass holds every router option, so a Router and its
store, dispatcher and reverse router always agree on them.
"""

from dataclasses import dataclass

from spur.dispatch import OutputFormat, parse_output_format
from spur.routing.chunks import CHUNK_SIZE


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(namespace="api/v2", output_format="json")
    """

    # Path prefix shared by every route; empty for none
    namespace: str = ""

    # HTML/JSON selection for RespondTo handler output
    output_format: OutputFormat = OutputFormat.AUTO

    # Max dynamic routes merged into one regex
    chunk_size: int = CHUNK_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_format", parse_output_format(self.output_format))
