from pydantic import BaseModel

from pitchcraft.schemas.idea import InvestorPersona, StartupIdeaCreate, StartupIdeaRead
from pitchcraft.schemas.pitch import ExecutiveSummaryRead, PitchDeckRead


class GeneratePitchRequest(BaseModel):
    startup_idea: StartupIdeaCreate
    investor_persona: InvestorPersona | None = None


class GeneratePitchResponse(BaseModel):
    pitch_deck: PitchDeckRead
    executive_summary: ExecutiveSummaryRead
    idea: StartupIdeaRead
