"""Poll and option schemas."""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from votebox.core.constants import BAND, WEBSITE


class PollRead(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    message: str


class OptionBase(BaseModel):
    """Fields shared by every option flavor."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    link: str
    votes: int = 0


class BandOption(OptionBase):
    kind: Literal["band"] = BAND

    @property
    def song_link(self) -> str:
        return self.link


class WebsiteOption(OptionBase):
    kind: Literal["website"] = WEBSITE


Option = Annotated[Union[BandOption, WebsiteOption], Field(discriminator="kind")]

OPTION_TYPES = {
    BAND: BandOption,
    WEBSITE: WebsiteOption,
}
