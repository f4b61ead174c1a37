"""Default state key names for LangGraph integration."""

# Standard state keys used by the sentence split node
INPUT_TEXT = "input_text"
SENTENCES = "sentences"
