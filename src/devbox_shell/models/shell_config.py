"""Hook configuration model for devbox-shell."""

from pydantic import BaseModel, field_validator


class ShellConfig(BaseModel):
    """Init hook content supplied by the environment manager."""

    pre_init_hook: str = ""
    post_init_hook: str = ""

    @field_validator("pre_init_hook", "post_init_hook", mode="before")
    @classmethod
    def _join_hook_lines(cls, value: object) -> object:
        if isinstance(value, list):
            return "\n".join(str(line) for line in value)
        return value
