"""
Balatro Advisor Web App
Streamlit interface for scoring hands and getting play recommendations.
"""

import pandas as pd
import streamlit as st

from balatro_advisor.advisor import Advisor
from balatro_advisor.config import AdvisorConfig
from balatro_advisor.engine.deck import parse_hand
from balatro_advisor.engine.errors import AdvisorError
from balatro_advisor.engine.hand_detector import HandType
from balatro_advisor.engine.recommendation import Action
from balatro_advisor.engine.scoring import HandLevelTable
from balatro_advisor.presets import PRESETS

# Page config
st.set_page_config(
    page_title="Balatro Advisor",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Balatro Advisor")
st.markdown("*Best play search and play/discard recommendations*")


@st.cache_resource
def get_config():
    return AdvisorConfig.load()


config = get_config()

# Sidebar for settings
st.sidebar.header("Hand")

source = st.sidebar.radio("Source", ["Scenario", "Custom Hand"])

if source == "Scenario":
    preset_options = list(PRESETS.keys())
    selected = st.sidebar.selectbox(
        "Scenario",
        options=preset_options,
        format_func=lambda x: PRESETS[x].name
    )
    scenario = PRESETS[selected]
    st.sidebar.markdown(f"*{scenario.description}*")
    hand_text = scenario.hand
    defaults = (scenario.target_score, scenario.hands_remaining, scenario.discards_remaining)
    situation = (scenario.ante, scenario.money)
    preset_levels = scenario.hand_levels
    level_scope = selected
else:
    hand_text = st.sidebar.text_input("Cards", value="K♠ K♥ Q♠ J♠ 10♠ 7♦ 3♣ 2♠",
                                      help="e.g. A♠ Kh 10d:glass Q♣:bonus:foil")
    defaults = (config.target_score, config.hands_remaining, config.discards_remaining)
    situation = (1, 0)
    preset_levels = {}
    level_scope = "custom"

target_score = st.sidebar.number_input("Target Score", min_value=0, value=defaults[0], step=50)
hands_remaining = st.sidebar.number_input("Hands Remaining", min_value=0, value=defaults[1])
discards_remaining = st.sidebar.number_input("Discards Remaining", min_value=0, value=defaults[2])
ante = st.sidebar.number_input("Ante", min_value=1, value=situation[0])
money = st.sidebar.number_input("Money", min_value=0, value=situation[1])

with st.sidebar.expander("📈 Hand Levels"):
    # Scenario levels win over the config file
    configured = HandLevelTable(config.hand_levels)
    for name, level in preset_levels.items():
        configured.set(name, level)
    levels = {}
    for hand_type in HandType:
        level = st.number_input(hand_type.value, min_value=1, value=configured.get(hand_type),
                                key=f"level_{level_scope}_{hand_type.name}")
        if level > 1:
            levels[hand_type.name] = int(level)

st.divider()

try:
    hand = parse_hand(hand_text)
except AdvisorError as e:
    st.error(f"Invalid hand: {e}")
    st.stop()

if not hand:
    st.info("Enter some cards to analyze.")
    st.stop()

advisor = Advisor(config.with_overrides(hand_levels=levels))
report = advisor.generate_report(
    hand, int(target_score), int(hands_remaining), int(discards_remaining),
    money=int(money), ante=int(ante),
)
rec = report.recommendation

st.subheader("Your Hand")
st.caption(f"Ante {report.ante}  ·  Money ${report.money}")
st.code("  ".join(str(c) for c in hand))

# Recommendation header
if rec.action == Action.PLAY:
    st.success(f"▶️ PLAY ({rec.confidence.value} confidence)")
else:
    st.warning(f"🔄 DISCARD ({rec.confidence.value} confidence)")

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Hand Type", rec.hand_type.value)
with col2:
    st.metric("Expected Score", f"{rec.expected_score:,}")
with col3:
    st.metric("Target", f"{report.target_score:,}",
              delta=f"{rec.expected_score - report.target_score:,}")
with col4:
    st.metric("Urgency", report.urgency.value)

col1, col2 = st.columns(2)
with col1:
    st.markdown("**Recommended Cards**")
    for card in rec.cards:
        st.markdown(f"- {card}")
with col2:
    st.markdown("**Cards to Discard**")
    if rec.cards_to_discard:
        for card in rec.cards_to_discard:
            st.markdown(f"- {card}")
    else:
        st.markdown("*None*")

st.subheader("🧠 Reasoning")
for reason in rec.reasoning:
    st.markdown(f"- {reason}")

best = advisor.best_play(hand)
with st.expander("Score Breakdown"):
    st.write(f"**Level:** {best.level}")
    st.write(f"**Base:** {best.result.base_chips} chips × {best.result.base_mult} mult")
    st.code(best.calculation)

# Alternatives table
st.subheader("📊 Alternative Plays")
plays = advisor.analyze_all_plays(hand)
chart_data = pd.DataFrame([
    {
        "Hand Type": play.hand_type.value,
        "Score": play.score,
        "Chips": play.total_chips,
        "Mult": play.total_mult,
        "XMult": play.x_mult,
        "Cards": ", ".join(str(c) for c in play.cards),
    }
    for play in plays
])
st.dataframe(chart_data.head(10), use_container_width=True, hide_index=True)

st.subheader("Best Score by Hand Type")
by_type = chart_data.groupby("Hand Type")["Score"].max().sort_values(ascending=False)
st.bar_chart(by_type)

# Footer
st.divider()
st.markdown("*Built with the Balatro Advisor engine*")
