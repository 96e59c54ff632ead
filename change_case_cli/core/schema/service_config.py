from pydantic import BaseModel, ConfigDict, Field


class ServiceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    app_name: str = Field(default="change-case-cli")
    case: str = Field(default="", description="case used when `--case` is not given")
    log_level: str = Field(default="WARNING")
    example_value: str = Field(default="@foo BAR", description="value rendered in the usage examples")
