"""LangGraph node factories for sentence splitting."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from .state_keys import INPUT_TEXT, SENTENCES

def make_sentence_split_node(segmenter: Segmenter,
                             text_key: str = INPUT_TEXT,
                             sentences_key: str = SENTENCES):
    """
    Create a LangGraph node that splits a state text field into sentences.
    
    Args:
        segmenter: Any segmenter, typically a SentenceSegmenter
        text_key: State key containing the text to split
        sentences_key: State key the sentence list is written to
        
    Returns:
        RunnableLambda: Node that adds the sentence list to state
    """
    def _split(state):
        return {sentences_key: segmenter.segment(state.get(text_key))}
    
    return RunnableLambda(_split)
