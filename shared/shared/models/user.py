from pydantic import BaseModel, ConfigDict


class CurrentUser(BaseModel):
    """Caller identity decoded from the bearer token.

    ``id`` is the identity provider's opaque subject string; progress rows
    are keyed by it verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    email: str = ""
