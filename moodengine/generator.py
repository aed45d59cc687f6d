"""Reaction generator: picks reactions and tracks reward, reaction and mood history."""

from __future__ import annotations

from moodengine.config import (
    DEFAULT_FRAME_SIZE,
    DEFAULT_WINDOW_SIZE,
    Action,
    CharacterState,
    LoadFrom,
    Mood,
    Personality,
    Reaction,
    mood_name,
)
from moodengine.personality import SMA
from moodengine.reactions import ReactionTable, reaction_name
from moodengine.rewards import RewardTable


class ReactGenerator:
    """Generates reactions for a character and keeps its logs."""

    def __init__(self) -> None:
        self.rewards = RewardTable()
        self.rewards.load(LoadFrom.FLASH)
        self.reactions = ReactionTable()
        self.reactions.load(LoadFrom.FLASH)
        self.character = CharacterState(
            personality=Personality.BALANCED,
            mood=Mood.POSITIVE,
            reaction=Reaction.CALM,
        )
        self.sma = SMA(DEFAULT_FRAME_SIZE)
        self._frame_size = DEFAULT_FRAME_SIZE
        self.window_size = DEFAULT_WINDOW_SIZE
        self.reaction_logs: list[Reaction] = []
        self.mood_logs: list[Mood] = []
        self.reward_logs: list[float] = []
        self.reward_multiplier: dict[Personality, float] = {p: 1.0 for p in Personality}
        self.mood_change_counter = 0
        # Positive mood needs the positivity margin to exceed this value.
        self.positive_threshold = 0.0

    @property
    def frame_size(self) -> int:
        """Number of entries kept for mood history and the moving average."""
        return self._frame_size

    @frame_size.setter
    def frame_size(self, size: int) -> None:
        self._frame_size = size
        self.sma.frame_size = size

    def set_reward_multiplier(self, achiever, balanced, creative, distressed) -> None:
        """Set the per-personality multiplier damping repeated rewards."""
        self.reward_multiplier[Personality.ACHIEVER] = achiever
        self.reward_multiplier[Personality.BALANCED] = balanced
        self.reward_multiplier[Personality.CREATIVE] = creative
        self.reward_multiplier[Personality.DISTRESSED] = distressed

    def set_reaction(self, personality, mood, action, reaction) -> None:
        """Override the reaction for a situation."""
        self.reactions.set(personality, mood, action, reaction)

    def get_reaction(self, personality: Personality, mood: Mood, action: Action) -> Reaction:
        """Return the reaction for a situation and log its reward."""
        reaction = self.reactions.lookup(personality, mood, action)
        self.add_reward_log(self.rewards.reward(personality, reaction))
        return reaction

    def slide_window(self, values: list[float], frame_size: int, window_size: int) -> None:
        """Update mood positivity and negativity from the last window of ``values``.

        ``values`` is trimmed in place by one entry when it exceeds ``frame_size``.
        """
        if len(values) == window_size:
            self.character.mood_changed = True
        elif len(values) >= window_size:
            self.character.mood_changed = True
            if len(values) > frame_size:
                del values[0]
            positivity = 0.0
            negativity = 0.0
            for value in values[len(values) - window_size:]:
                if value >= 0:
                    positivity += value
                else:
                    negativity += value
            self.character.mood_positivity = positivity
            self.character.mood_negativity = negativity
        else:
            self.character.mood_changed = False

    def add_reaction_log(self, reaction: Reaction) -> None:
        """Record a reaction, keeping at most ``window_size`` entries."""
        self.reaction_logs.append(Reaction(reaction))
        if len(self.reaction_logs) > self.window_size:
            del self.reaction_logs[0]

    def add_reward_log(self, value: float) -> None:
        """Record a reward value."""
        self.reward_logs.append(value)

    def add_mood_log(self, mood: Mood) -> None:
        """Record a mood, keeping at most ``frame_size`` entries."""
        self.mood_logs.append(Mood(mood))
        if len(self.mood_logs) > self.frame_size:
            del self.mood_logs[0]

    def predict_mood(self) -> Mood:
        """Derive the mood from current positivity and negativity.

        Until ``window_size`` reactions are logged the current mood is kept.
        """
        if len(self.reaction_logs) < self.window_size:
            return self.character.mood
        if self.mood_change_counter > self.frame_size:
            self.mood_change_counter = 0
        else:
            self.mood_change_counter += 1
        total = self.character.mood_positivity - self.character.mood_negativity
        if total == 0:
            return self.character.mood
        pos = self.character.mood_positivity / total
        neg = -self.character.mood_negativity / total
        margin = pos - neg
        if margin > self.positive_threshold:
            self.character.mood = Mood.POSITIVE
        elif margin < 0:
            self.character.mood = Mood.NEGATIVE
        elif margin <= 0.25:
            self.character.mood = Mood.NEUTRAL
        return self.character.mood

    def predict_personality(self) -> Personality:
        """Predict the personality from the mood log."""
        return self.sma.predict_personality(self.mood_logs)

    def mood_details(self) -> tuple[float, float]:
        """Return (positivity, negativity) as percentages."""
        total = self.character.mood_positivity - self.character.mood_negativity
        positivity = self.character.mood_positivity / total * 100.0
        negativity = -self.character.mood_negativity / total * 100.0
        return positivity, negativity

    def format_reaction_logs(self) -> str:
        """Render the reaction log as a line of text."""
        return " ".join(["Reaction Logs:", *(reaction_name(r) for r in self.reaction_logs)])

    def format_reward_logs(self) -> str:
        """Render the reward log as a line of text."""
        return " ".join(["Reward Logs:", *(f"{v:.2f}" for v in self.reward_logs)])

    def format_mood_logs(self) -> str:
        """Render the mood log as a line of text."""
        return " ".join(["Mood Logs:", *(mood_name(m) for m in self.mood_logs)])