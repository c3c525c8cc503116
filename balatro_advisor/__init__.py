"""
Balatro Hand Advisor
"""

from .engine.deck import Card, Deck, Suit, Enhancement, Edition, Seal, parse_hand
from .engine.errors import AdvisorError, InvalidCard, InvalidLevel, UnknownHandType, ConfigError
from .engine.hand_detector import HandType, classify
from .engine.scoring import ScoringEngine, ScoreResult, HandLevelTable, calculate_score
from .engine.search import BestPlay, best_play, rank_all_plays
from .engine.recommendation import Action, Confidence, Urgency, Recommendation, recommend
from .advisor import Advisor, SituationReport
from .config import AdvisorConfig

__version__ = "0.1.0"
