"""Club media content: match copy, rewrites, scorer suggestions, and graphics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from pitchside.core import prompts
from pitchside.core.logging_utils import log_event
from pitchside.core.models import Club, Fixture, Player
from pitchside.imaging.client import ImageGenerationClient
from pitchside.imaging.types import ActionKind, AspectRatio, GenerationResult, ReferenceImage
from pitchside.llm.client import TextGenerationClient
from pitchside.llm.parsing import extract_json
from pitchside.llm.types import TextResult


@dataclass(frozen=True)
class GenerationContext:
    """Optional extra details supplied by the editor for a piece of match content."""

    match_type: str = ""
    vibe: str = ""
    motm: str = ""
    manager_quote: str = ""


def format_kickoff(fixture: Fixture) -> str:
    """Long-form kickoff, e.g. ``Saturday 14 September, 15:00``."""
    dt = fixture.kickoff_time
    return f"{dt.strftime('%A')} {dt.day} {dt.strftime('%B')}, {dt.strftime('%H:%M')}"


def _squad_line(club: Club) -> str:
    return ", ".join(f"#{p.number} {p.name} ({p.position})" for p in club.players)


def _system_prompt(club: Club) -> str:
    return prompts.MEDIA_OFFICER_PROMPT.format(
        club_name=club.name,
        nickname=club.nickname,
        tone=club.tone_context,
        squad=_squad_line(club),
    )


def _match_details(fixture: Fixture, context: GenerationContext) -> str:
    return prompts.MATCH_DETAILS_TEMPLATE.format(
        opponent=fixture.opponent,
        venue=fixture.venue,
        kickoff=format_kickoff(fixture),
        competition=fixture.competition or "League Match",
        stakes=context.match_type or "Standard League Match",
    )


def _report_task(fixture: Fixture, match: str, context: GenerationContext) -> str:
    ours, theirs = fixture.scores()
    if fixture.scorers:
        scorers = f"Goalscorers: {', '.join(fixture.scorers)}"
    else:
        scorers = "No specific scorers recorded."
    stats = ""
    if fixture.stats is not None:
        s = fixture.stats
        our_pos, their_pos = (s.home_possession, s.away_possession) if fixture.is_home else (s.away_possession, s.home_possession)
        our_shots, their_shots = (s.home_shots, s.away_shots) if fixture.is_home else (s.away_shots, s.home_shots)
        stats = (
            "Stats:\n"
            f"- Possession: {our_pos}% (Us) vs {their_pos}% (Them)\n"
            f"- Shots: {our_shots} (Us) vs {their_shots} (Them)"
        )
    return prompts.REPORT_TASK.format(
        match=match,
        result=fixture.outcome(),
        ours=ours,
        theirs=theirs,
        notes=fixture.key_events,
        motm=context.motm or "Not specified",
        vibe=context.vibe or "Standard",
        quote=context.manager_quote or "We go again next week.",
        scorers=scorers,
        stats=stats,
    )


class ContentService:
    """Builds club-branded prompts and sends them through the text and image clients."""

    def __init__(self, text_client: TextGenerationClient, image_client: ImageGenerationClient) -> None:
        self.text_client = text_client
        self.image_client = image_client

    def _text(self, club: Club, prompt: str, action: str) -> TextResult:
        return self.text_client.generate_text(prompt, metadata={"clubId": club.id, "action": action})

    def _image(
        self,
        club: Club,
        prompt: str,
        action: str,
        *,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
        reference_image: Optional[ReferenceImage] = None,
    ) -> GenerationResult:
        log_event("content_image_requested", {"club_id": club.id, "action": action, "aspect_ratio": aspect_ratio.value})
        return self.image_client.generate_image(
            prompt.strip(),
            action=action,
            club_id=club.id,
            reference_image=reference_image,
            aspect_ratio=aspect_ratio,
        )

    # -- text content -------------------------------------------------------

    def generate_content(
        self,
        club: Club,
        fixture: Fixture,
        content_type: str,
        context: Optional[GenerationContext] = None,
    ) -> TextResult:
        """Write match copy of one content type (PREVIEW, REPORT, SOCIAL, GRAPHIC_COPY, ...)."""
        ctx = context or GenerationContext()
        kind = str(content_type or "").upper()
        match = _match_details(fixture, ctx)
        if kind == "PREVIEW":
            captain = club.captain.name if club.captain else "the captain"
            task = prompts.PREVIEW_TASK.format(match=match, captain=captain)
        elif kind == "REPORT":
            task = _report_task(fixture, match, ctx)
        elif kind == "SOCIAL":
            third = "Full time score graphic text" if fixture.status == "COMPLETED" else "Kick-off reminder"
            task = prompts.SOCIAL_TASK.format(match=match, third=third)
        elif kind == "GRAPHIC_COPY":
            task = prompts.GRAPHIC_COPY_TASK.format(match=match, stakes=ctx.match_type or "Matchday")
        else:
            task = f"Task: Generate content of type {kind}.\nMatch: {match}"
        prompt = f"{_system_prompt(club)}\n\n{task}"
        return self._text(club, prompt, f"generate_content:{kind}")

    def rewrite_content(self, club: Club, original_text: str, instruction: str) -> TextResult:
        prompt = prompts.REWRITE_PROMPT.format(
            instruction=instruction,
            original=original_text,
            tone=club.tone_context,
        )
        return self._text(club, prompt, "rewrite_content")

    def suggest_scorers(self, club: Club, opponent: str, goals: int, notes: str) -> List[str]:
        """Ask the model which squad players scored; returns ``[]`` when the answer is unusable."""
        squad = "\n".join(f"- {p.name} ({p.position}, Form: {p.form})" for p in club.players)
        prompt = prompts.SUGGEST_SCORERS_PROMPT.format(goals=goals, opponent=opponent, notes=notes, squad=squad)
        result = self._text(club, prompt, "suggest_scorers")
        if not result.ok:
            return []
        try:
            names = extract_json(result.text)
        except ValueError:
            return []
        if not isinstance(names, list):
            return []
        return [str(name) for name in names if str(name).strip()]

    # -- graphics -----------------------------------------------------------

    def generate_matchday_graphic(self, club: Club, fixture: Fixture, style: str = "neon") -> GenerationResult:
        if style not in prompts.MATCHDAY_STYLES:
            raise ValueError(f"Unknown matchday style: {style}")
        kickoff = fixture.kickoff_time
        prompt = prompts.MATCHDAY_GRAPHIC_PROMPT.format(
            club_name=club.name,
            nickname=club.nickname,
            opponent=fixture.opponent,
            venue=f"{club.name} Stadium" if fixture.is_home else "Away",
            date=f"{kickoff.strftime('%a')} {kickoff.day} {kickoff.strftime('%b')}",
            time=kickoff.strftime("%H:%M"),
            competition=fixture.competition or "League Match",
            style=prompts.MATCHDAY_STYLES[style],
            primary=club.primary_color,
            secondary=club.secondary_color,
        )
        return self._image(club, prompt, f"{ActionKind.MATCHDAY_GRAPHIC.value}:{style}")

    def generate_result_graphic(self, club: Club, fixture: Fixture) -> GenerationResult:
        if fixture.status != "COMPLETED" or fixture.result_home is None or fixture.result_away is None:
            raise ValueError("Fixture must be completed with results to generate result graphic.")
        ours, theirs = fixture.scores()
        result = fixture.outcome()
        extras = ""
        if fixture.scorers:
            extras += f"SCORERS: {', '.join(fixture.scorers)}\n"
        if fixture.man_of_the_match:
            extras += f"MAN OF THE MATCH: {fixture.man_of_the_match}\n"
        prompt = prompts.RESULT_GRAPHIC_PROMPT.format(
            club_name=club.name,
            opponent=fixture.opponent,
            ours=ours,
            theirs=theirs,
            result=result,
            extras=extras,
            competition=fixture.competition or "League",
            mood=prompts.RESULT_MOODS[result],
            primary=club.primary_color,
            secondary=club.secondary_color,
            celebration="Victory celebration elements" if result == "WIN" else "Professional presentation",
        )
        return self._image(club, prompt, ActionKind.RESULT_GRAPHIC.value)

    def generate_player_spotlight(self, club: Club, player: Player) -> GenerationResult:
        stats = player.stats
        prompt = prompts.PLAYER_SPOTLIGHT_PROMPT.format(
            club_name=club.name,
            name=player.name,
            position=player.position,
            number=player.number,
            captain="CAPTAIN: Yes (include captain armband symbol)\n\n" if player.is_captain else "\n",
            pace=stats.pace,
            shooting=stats.shooting,
            passing=stats.passing,
            dribbling=stats.dribbling,
            defending=stats.defending,
            physical=stats.physical,
            form=player.form,
            primary=club.primary_color,
            secondary=club.secondary_color,
        )
        return self._image(club, prompt, ActionKind.PLAYER_SPOTLIGHT.value, aspect_ratio=AspectRatio.TALL)

    def generate_announcement_graphic(
        self,
        club: Club,
        title: str,
        subtitle: str,
        kind: str = "news",
    ) -> GenerationResult:
        if kind not in prompts.ANNOUNCEMENT_STYLES:
            raise ValueError(f"Unknown announcement type: {kind}")
        prompt = prompts.ANNOUNCEMENT_PROMPT.format(
            club_name=club.name,
            title=title,
            subtitle=subtitle,
            kind=kind.upper(),
            style=prompts.ANNOUNCEMENT_STYLES[kind],
            primary=club.primary_color,
            secondary=club.secondary_color,
        )
        return self._image(club, prompt, f"{ActionKind.ANNOUNCEMENT.value}:{kind}")

    def generate_custom_image(
        self,
        club: Club,
        custom_prompt: str,
        reference_image: Optional[ReferenceImage] = None,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> GenerationResult:
        prompt = prompts.CUSTOM_IMAGE_PROMPT.format(
            club_name=club.name,
            nickname=club.nickname,
            request=custom_prompt,
            primary=club.primary_color,
            secondary=club.secondary_color,
            tone=club.tone_context,
            reference=prompts.REFERENCE_IMAGE_NOTE if reference_image is not None else "",
        )
        return self._image(
            club,
            prompt,
            ActionKind.CUSTOM_IMAGE.value,
            aspect_ratio=AspectRatio(aspect_ratio),
            reference_image=reference_image,
        )


def build_content_service(settings: Any) -> ContentService:
    """Wire a ``ContentService`` against the API named in ``settings``."""
    text_client = TextGenerationClient.from_base_url(
        settings.api_base_url,
        default_provider=settings.ai_provider,
        policy=settings.retry_policy(),
    )
    image_client = ImageGenerationClient.from_base_url(settings.api_base_url)
    return ContentService(text_client, image_client)
