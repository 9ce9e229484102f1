import logging

from streamtoken.schemas.models import SignedToken, TokenRequest
from streamtoken.services.assembler import assemble
from streamtoken.services.signer import sign

logger = logging.getLogger(__name__)


def generate_token(request: TokenRequest) -> SignedToken:
    if request.lifetime is not None:
        logger.debug("Token expires at %s (lifetime=%ss)", request.end_time, request.lifetime)
    else:
        logger.debug("Token expires at %s", request.end_time)
    fields = assemble(request)
    digest = sign(fields.signed_fields, request.secret)
    return SignedToken(public_string=fields.public_string, digest=digest)
