"""API request models."""

from pydantic import BaseModel, Field


class CheckRequest(BaseModel):
    """Request to lint one XLIFF document."""

    document: str = Field(
        ...,
        min_length=1,
        description="Raw XLIFF document text",
        examples=[
            '<xliff version="2.0"><file id="f1"><unit id="greeting"><segment>'
            "<source>Hello %{name}</source><target>Bonjour %{name}</target>"
            "</segment></unit></file></xliff>"
        ],
    )
