from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration for stored scorecard models."""
    model_config = ConfigDict(validate_assignment=True)
