"""
Balatro advisor engine components.
"""

from .errors import AdvisorError, InvalidCard, InvalidLevel, UnknownHandType, ConfigError
from .deck import Card, Deck, Suit, Enhancement, Edition, Seal, RANKS, RANK_VALUES, parse_hand, deal_random_hand
from .hand_detector import HandType, HAND_BASE_VALUES, LEVEL_UP_BONUS, classify, is_straight, is_flush, hand_values
from .scoring import ScoringEngine, ScoreResult, HandLevelTable, calculate_score
from .search import BestPlay, best_play, rank_all_plays, iter_combinations
from .recommendation import (Action, Confidence, Urgency, Recommendation, DiscardAdvice,
                             recommend, recommend_discard, urgency)
