"""File policy model: what write and create helpers do when a path exists."""

from pydantic import BaseModel, Field


class FileProperties(BaseModel):
    """Policy applied when a helper meets a path that already exists."""

    override_files: bool = Field(default=False, description="Overwrite existing files on write")
    file_exists_error: bool = Field(default=False, description="Raise when a file to write already exists")
    dir_exists_error: bool = Field(default=False, description="Raise when a directory to create already exists")

    class Config:
        validate_assignment = True


# Process-wide default used by helpers called without an explicit policy.
default_file_properties = FileProperties()


def get_default_file_properties() -> FileProperties:
    """Return the process-wide default policy."""
    return default_file_properties


def set_default_file_properties(properties: FileProperties) -> None:
    """Replace the process-wide default policy in place."""
    for name, value in properties.model_dump().items():
        setattr(default_file_properties, name, value)
