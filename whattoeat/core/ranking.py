"""Preference-weighted scoring and band sampling for dish recommendation."""

import math
import logging
import random
from typing import List, Optional, Sequence, Iterable
from dataclasses import dataclass

from .data_loader import Recipe

logger = logging.getLogger(__name__)

VETO = float("-inf")


@dataclass(frozen=True)
class UserPreferences:
    """Liked and disliked ingredients or keywords."""
    likes: tuple = ()
    dislikes: tuple = ()

    @classmethod
    def from_lists(cls, likes: Optional[Iterable[str]] = None,
                   dislikes: Optional[Iterable[str]] = None) -> "UserPreferences":
        """Build preferences, dropping blank terms."""
        return cls(
            likes=tuple(t for t in (likes or ()) if t and t.strip()),
            dislikes=tuple(t for t in (dislikes or ()) if t and t.strip())
        )


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring constants. like_bonus against jitter decides the regime."""
    search_bonus: float = 100.0
    like_bonus: float = 60.0
    jitter: float = 50.0
    high_score_threshold: float = 45.0
    pool_fraction: float = 0.6

    @property
    def zones_overlap(self) -> bool:
        """True when a lucky neutral dish can outscore a liked one."""
        return self.like_bonus <= self.jitter

    @classmethod
    def from_settings(cls, settings) -> "ScoringConfig":
        return cls(
            search_bonus=settings.search_bonus,
            like_bonus=settings.like_bonus,
            jitter=settings.jitter,
            high_score_threshold=settings.high_score_threshold,
            pool_fraction=settings.pool_fraction
        )


@dataclass
class ScoredCandidate:
    """A recipe paired with its score for one sampling call."""
    recipe: Recipe
    score: float


class DishRanker:
    """Scores recipes against preferences and samples from the best band."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    @staticmethod
    def is_vetoed(recipe: Recipe, preferences: UserPreferences) -> bool:
        """A dislike found in the name or any ingredient rejects the recipe."""
        return any(recipe.mentions(dislike) for dislike in preferences.dislikes)

    @staticmethod
    def liked_terms(recipe: Recipe, preferences: UserPreferences) -> List[str]:
        """Liked terms found in the name or any ingredient."""
        return [like for like in preferences.likes if recipe.mentions(like)]

    def score(
        self,
        recipe: Recipe,
        preferences: UserPreferences,
        search_term: Optional[str] = None,
        rng: Optional[random.Random] = None
    ) -> float:
        """Score one recipe. Returns VETO for disliked recipes."""
        rng = rng or random

        if self.is_vetoed(recipe, preferences):
            return VETO

        score = 0.0

        if search_term and search_term in recipe.dish_name:
            score += self.config.search_bonus

        score += self.config.like_bonus * len(self.liked_terms(recipe, preferences))

        score += rng.random() * self.config.jitter
        return score

    def score_all(
        self,
        recipes: Sequence[Recipe],
        preferences: UserPreferences,
        rng: Optional[random.Random] = None
    ) -> List[ScoredCandidate]:
        """Score recipes, dropping vetoed ones, best first."""
        scored = []
        for recipe in recipes:
            value = self.score(recipe, preferences, rng=rng)
            if value > VETO:
                scored.append(ScoredCandidate(recipe=recipe, score=value))
        scored.sort(key=lambda x: x.score, reverse=True)
        return scored

    def select_pool(self, scored: List[ScoredCandidate], count: int) -> List[ScoredCandidate]:
        """Pick the band of candidates to draw from. ``scored`` is best first."""
        high_scorers = [c for c in scored if c.score > self.config.high_score_threshold]
        if len(high_scorers) >= count:
            return high_scorers

        pool_size = max(count, math.ceil(len(scored) * self.config.pool_fraction))
        return scored[:pool_size]

    def sample(
        self,
        recipes: Sequence[Recipe],
        preferences: UserPreferences,
        count: int,
        excluded_names: Iterable[str] = (),
        rng: Optional[random.Random] = None
    ) -> List[Recipe]:
        """
        Draw ``count`` recipes from ``recipes``.

        Recently shown dishes in ``excluded_names`` are skipped unless the
        fresh pool is too small, or too few fresh dishes survive dislikes.
        Disliked dishes are dropped unless that would leave fewer than
        ``count`` candidates, in which case the draw is a plain shuffle.
        Returns ``min(count, len(recipes))`` recipes.
        """
        if count <= 0:
            return []

        rng = rng or random
        excluded = set(excluded_names)

        fresh = [r for r in recipes if r.dish_name not in excluded]
        stale = [r for r in recipes if r.dish_name in excluded]
        rng.shuffle(stale)
        candidates = list(fresh)

        if len(fresh) < count:
            candidates.extend(stale[:count - len(fresh)])
            stale = stale[count - len(fresh):]
            logger.debug(f"Fresh pool too small ({len(fresh)} < {count}), reusing recent dishes")

        scored = self.score_all(candidates, preferences, rng=rng)

        if len(scored) < count:
            spare = [r for r in stale if not self.is_vetoed(r, preferences)]
            top_up = spare[:count - len(scored)]
            if top_up:
                logger.debug(f"Reusing {len(top_up)} recent dishes to avoid dislikes")
                scored = scored + self.score_all(top_up, preferences, rng=rng)
                scored.sort(key=lambda x: x.score, reverse=True)

        if len(scored) < count:
            logger.debug(f"Only {len(scored)} candidates survive dislikes, ignoring preferences")
            shuffled = list(candidates)
            rng.shuffle(shuffled)
            return shuffled[:count]

        pool = self.select_pool(scored, count)
        rng.shuffle(pool)
        return [c.recipe for c in pool[:count]]

