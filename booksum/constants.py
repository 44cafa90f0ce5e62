"""
Constants for the summarization pipeline that are unlikely to change between runs.
These are different from configuration parameters as they are not meant to be modified
by the user and are intrinsic to the algorithm's function.
"""

import re

# Sentence: a run of non-terminators followed by terminators, or a trailing fragment
SENTENCE_PATTERN = re.compile(r"[^.!?]+(?:[.!?]+|$)")

# Word token: maximal run of alphanumeric characters
WORD_PATTERN = re.compile(r"[^\W_]+")

# Bracketed numeric reference markers, e.g. "[12]"
REFERENCE_MARKER_PATTERN = re.compile(r"\[\d+\]")

# Leading punctuation, word core, trailing punctuation
TOKEN_PARTS_PATTERN = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)

TRANSITION_WORDS = (
    "Moreover",
    "Furthermore",
    "Additionally",
    "In addition",
)

# Optional scoring terms
TOPIC_INDICATORS = (
    "is",
    "was",
    "are",
    "were",
    "refers to",
    "defined as",
    "can be described as",
)
TOPIC_INDICATOR_SCORE = 2
FIRST_SENTENCE_TOPIC_BONUS = 3

BIOGRAPHICAL_KEYWORDS = (
    "born",
    "birth",
    "died",
    "death",
    "age",
    "founded",
    "established",
    "created",
    "invented",
    "discovered",
    "developed",
    "introduced",
    "is a",
    "was a",
    "known for",
    "famous for",
)
BIOGRAPHICAL_SCORE = 3

SUMMARY_ORDERS = ("rank", "document")

STOP_WORDS = frozenset("""
a about above after again against ain all am an and any are aren arent as at
be because been before being below between both but by
can cannot could couldn couldnt
d did didn didnt do does doesn doesnt doing don dont down during
each few for from further
had hadn hadnt has hasn hasnt have haven havent having he her here hers herself him
himself his how
i if in into is isn isnt it its itself
just
ll
m ma me might mightn more most must mustn my myself
needn no nor not now
o of off on once only or other our ours ourselves out over own
re
s same shan she should shouldn shouldnt so some such
t than that thats the their theirs them themselves then there these they this those
through to too
under until up
ve very
was wasn wasnt we were weren werent what when where which while who whom why will
with won wont would wouldn wouldnt
y you your yours yourself yourselves
""".split())
