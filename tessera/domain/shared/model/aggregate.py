from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base class for mutable aggregates.

    Aggregates own their state and change it through methods; assignments
    are validated so a setter cannot smuggle in a value of the wrong type.
    """

    model_config = ConfigDict(validate_assignment=True)
