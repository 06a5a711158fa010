from typing import NamedTuple


class InferredSignals(NamedTuple):
    audience_type: str
    user_intent: str
    value_proposition: str
