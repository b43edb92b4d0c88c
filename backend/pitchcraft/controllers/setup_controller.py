from pitchcraft.core.config import Settings
from pitchcraft.schemas.setup_check import ConfigCheck, SetupCheckRead

_OPENAI_RECOMMENDATIONS = [
    "Get an OpenAI API key from https://platform.openai.com/api-keys",
    "Add OPENAI_API_KEY to your .env file",
    "Restart the API server",
]


def check_setup(config: Settings) -> SetupCheckRead:
    """Report whether the generation backend is configured or demo mode is in use."""
    if config.demo_mode:
        openai_check = ConfigCheck(
            status="warning",
            message="OpenAI API key not configured - using demo mode",
            details={"demo_mode": True, "note": "Demo mode provides sample content for testing"},
        )
    else:
        openai_check = ConfigCheck(
            status="success",
            message="OpenAI API key configured",
            details={
                "demo_mode": False,
                "model": config.GENERATION_MODEL,
                "key_prefix": config.OPENAI_API_KEY[:7] + "...",
            },
        )

    if config.demo_mode:
        status, message = "warning", "Configuration warnings detected. Some features may use demo mode."
    else:
        status, message = "success", "All systems ready!"

    return SetupCheckRead(
        status=status,
        message=message,
        demo_mode=config.demo_mode,
        checks={"openai": openai_check},
        recommendations={"openai": _OPENAI_RECOMMENDATIONS if config.demo_mode else []},
    )
