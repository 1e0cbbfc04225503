from pydantic import BaseModel, ConfigDict


class TestCase(BaseModel):
    """
    Pydantic model for the entries of a test dataset. Every entry is identified by its label.
    """

    # Stage descriptors and other package types are stored on the entries directly
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)
    label: str
