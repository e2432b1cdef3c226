"""Constants for Subject Line Pro."""

from .models import PowerWord, SpamTrigger

# --- Severity levels ---
IMPACT_HIGH = "high"
IMPACT_MEDIUM = "medium"
IMPACT_LOW = "low"

# --- Spam score weights ---
SPAM_WEIGHTS = {
    IMPACT_HIGH: 25,
    IMPACT_MEDIUM: 15,
    IMPACT_LOW: 5,
}
SPAM_WEIGHT_DEFAULT = 10  # unrecognized impact
SPAM_CAPS_BONUS = 15  # any run of 3+ uppercase letters
SPAM_EXCLAMATION_BONUS = 20  # "!!" or longer

# --- Overall score weights ---
OVERALL_BASE = 70
OVERALL_SPAM_WEIGHT = 0.4
OVERALL_LENGTH_WEIGHT = 0.2
POWER_WORD_BONUS = 5
POWER_WORD_SATURATION = 3  # found words above this start costing points
POWER_WORD_EXCESS_PENALTY = 3
CAPS_PENALTY = 15
WORD_COUNT_PENALTY = 10
MIN_WORDS = 3
MAX_WORDS = 15

# --- Length bands (characters) ---
LENGTH_SHORT = 20  # below this is too short
LENGTH_IDEAL_MAX = 50
LENGTH_LONG = 70  # above this is too long
LENGTH_SCORE_SHORT = 50
LENGTH_SCORE_IDEAL = 100
LENGTH_SCORE_ACCEPTABLE = 80
LENGTH_SCORE_LONG = 60

SCORE_MIN = 0
SCORE_MAX = 100

# --- Suggestions ---
SUGGESTED_POWER_WORDS = 3

# --- Messages ---
INVALID_INPUT_MESSAGE = "Subject line must be a non-empty string"
CAPS_WORDS_ISSUE = "Contains words in ALL CAPS"
CAPS_ENTIRE_ISSUE = "Entire subject is in ALL CAPS"
TOO_LONG_ISSUE = "Subject line is too long"
TOO_SHORT_ISSUE = "Subject line is too short"
TOO_FEW_WORDS_ISSUE = "Too few words"

# --- Spam triggers (matched as substrings of the lower-cased subject) ---
SPAM_TRIGGERS: tuple[SpamTrigger, ...] = (
    SpamTrigger("free", IMPACT_HIGH, "Common spam flag"),
    SpamTrigger("guaranteed", IMPACT_HIGH, "Overpromising"),
    SpamTrigger("limited time", IMPACT_MEDIUM, "Creates artificial urgency"),
    SpamTrigger("cash", IMPACT_HIGH, "Financial spam trigger"),
    SpamTrigger("click here", IMPACT_MEDIUM, "Generic call to action"),
    SpamTrigger("congratulations", IMPACT_HIGH, "Common phishing opener"),
    SpamTrigger("deal", IMPACT_LOW, "Promotional language"),
    SpamTrigger("discount", IMPACT_LOW, "Promotional language"),
    SpamTrigger("urgent", IMPACT_HIGH, "Creates artificial urgency"),
    SpamTrigger("winner", IMPACT_HIGH, "Common phishing approach"),
    SpamTrigger("!!!!", IMPACT_HIGH, "Excessive punctuation"),
    SpamTrigger("$$$", IMPACT_HIGH, "Spam symbol"),
    SpamTrigger("act now", IMPACT_MEDIUM, "Creates artificial urgency"),
    SpamTrigger("best price", IMPACT_MEDIUM, "Promotional language"),
    SpamTrigger("buy", IMPACT_LOW, "Direct sales language"),
)

# --- Power words (matched as whole lower-cased tokens) ---
POWER_WORDS: tuple[PowerWord, ...] = (
    PowerWord("discover", "curiosity", IMPACT_MEDIUM),
    PowerWord("exclusive", "exclusivity", IMPACT_HIGH),
    PowerWord("proven", "credibility", IMPACT_MEDIUM),
    PowerWord("transform", "improvement", IMPACT_HIGH),
    PowerWord("unlock", "opportunity", IMPACT_MEDIUM),
    PowerWord("essential", "importance", IMPACT_MEDIUM),
    PowerWord("instantly", "speed", IMPACT_MEDIUM),
    PowerWord("guaranteed", "assurance", IMPACT_HIGH),
    PowerWord("remarkable", "uniqueness", IMPACT_MEDIUM),
    PowerWord("revolutionary", "innovation", IMPACT_HIGH),
    PowerWord("secret", "exclusivity", IMPACT_HIGH),
    PowerWord("stunning", "impact", IMPACT_MEDIUM),
    PowerWord("unlimited", "abundance", IMPACT_MEDIUM),
    PowerWord("premium", "quality", IMPACT_MEDIUM),
    PowerWord("valuable", "worth", IMPACT_MEDIUM),
)
