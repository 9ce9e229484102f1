import logging

from streamtoken.schemas.models import TokenFields, TokenRequest

logger = logging.getLogger(__name__)


def assemble(request: TokenRequest) -> TokenFields:
    """Build the public and signed field lists for a resolved request.

    The order is fixed: ``ip``, ``st``, ``exp``. The signed list repeats the
    public one and appends ``stream_id``, which never appears in the output.
    """
    public_fields: list[str] = []
    if request.ip is not None:
        public_fields.append(f"ip={request.ip}")
    if request.start_time is not None:
        public_fields.append(f"st={request.start_time}")
    public_fields.append(f"exp={request.end_time}")

    signed_fields = [*public_fields, f"stream_id={request.stream_id}"]

    logger.debug("Assembled token fields: %s", ",".join(f.split("=", 1)[0] for f in signed_fields))
    return TokenFields(public_fields=tuple(public_fields), signed_fields=tuple(signed_fields))
