# =============================================================================
# STAT STAGE CONSTANTS
# =============================================================================
MIN_STAT_STAGE = -6
DEFAULT_STAT_STAGE = 0
MAX_STAT_STAGE = 6

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0  # immune
TYPE_MUL_NOT_EFFECTIVE = 0.5  # not very effective
TYPE_MUL_NORMAL = 1.0  # neutral, also the value of any absent table entry
TYPE_MUL_SUPER_EFFECTIVE = 2.0  # super effective

# =============================================================================
# MONSTER LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_MON_MOVES = 4
MAX_IV = 31
MAX_EV = 255
NATURE_RAISED_MULTIPLIER = 1.1
NATURE_LOWERED_MULTIPLIER = 0.9

# =============================================================================
# DAMAGE PIPELINE
# =============================================================================
STAB_MULTIPLIER = 1.5
ADAPTABILITY_STAB_MULTIPLIER = 2.0
BASE_CRITICAL_CHANCE = 1 / 24
CRITICAL_MULTIPLIER = 1.5
MIN_DAMAGE_VARIANCE = 0.85
DAMAGE_VARIANCE_RANGE = 0.15  # variance lands in [0.85, 1.0)

PINCH_ABILITY_MULTIPLIER = 1.5  # Blaze, Torrent, Overgrow, Swarm
TECHNICIAN_POWER_THRESHOLD = 60
BURN_ATTACK_MULTIPLIER = 0.5

# Held items
TYPE_BOOST_MULTIPLIER = 1.2
CHOICE_ITEM_MULTIPLIER = 1.5
LIFE_ORB_MULTIPLIER = 1.3
LIFE_ORB_RECOIL_DIVISOR = 10
EVIOLITE_MULTIPLIER = 1.5
LEFTOVERS_HEAL_DIVISOR = 16
PINCH_HEAL_DIVISOR = 4

# Struggle
STRUGGLE_RECOIL_DIVISOR = 4

# =============================================================================
# STATUS CONDITIONS
# =============================================================================
POISON_DAMAGE_RATIO = 1 / 8
BURN_DAMAGE_RATIO = 1 / 16
PARALYSIS_IMMOBILIZE_CHANCE = 0.25
PARALYSIS_SPEED_MULTIPLIER = 0.5
SLEEP_WAKE_CHANCE = 1 / 3
FREEZE_THAW_CHANCE = 0.2
SHED_SKIN_CHANCE = 1 / 3
CONTACT_STATUS_CHANCE = 0.3  # Static, Flame Body, Poison Touch
SWIFT_SWIM_SPEED_MULTIPLIER = 2.0
ABSORB_HEAL_DIVISOR = 4  # Water Absorb, Volt Absorb

# =============================================================================
# FRIENDSHIP
# =============================================================================
MIN_FRIENDSHIP = 0
MAX_FRIENDSHIP = 255
DEFAULT_FRIENDSHIP = 70
FRIENDSHIP_EVOLUTION_THRESHOLD = 220
FRIENDSHIP_BONUS_THRESHOLD = 220
FRIENDSHIP_CRITICAL_BONUS = 1 / 8
FRIENDSHIP_STATUS_RECOVERY_CHANCE = 0.1
FRIENDSHIP_LOW_BAND = 100  # delta band edges: <100, <200, >=200
FRIENDSHIP_HIGH_BAND = 200

# =============================================================================
# CAPTURE
# =============================================================================
DEFAULT_CATCH_RATE = 45
MAX_CATCH_VALUE = 255
GUARANTEED_CATCH_MODIFIER = 255
SHAKE_CHECKS = 3
SHAKE_ROLL_RANGE = 65536
SHAKE_NUMERATOR = 1048560
SHAKE_DENOMINATOR = 16711680
SLEEP_FREEZE_CATCH_BONUS = 2.0
OTHER_STATUS_CATCH_BONUS = 1.5
PREMIER_BALL_PURCHASE_STEP = 10

NET_BALL_MODIFIER = 3.0
DARK_BALL_MODIFIER = 3.0
REPEAT_BALL_MODIFIER = 3.0
QUICK_BALL_MODIFIER = 4.0
TIMER_BALL_TURN_STEP = 0.3
TIMER_BALL_MAX_MODIFIER = 4.0

# =============================================================================
# EXPERIENCE AND PRIZE MONEY
# =============================================================================
TRAINER_EXP_MULTIPLIER = 1.5
EXP_DIVISOR = 7
LOSS_PENALTY_FLOOR = 100

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
MSG_NO_EFFECT = "It has no effect!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_CRITICAL_HIT = "A critical hit!"
MSG_MISSED = "The attack missed!"
MSG_NO_PP = "But there's no PP left for this move!"
MSG_BUT_FAILED = "But it failed!"
