"""
Description:
Fixed instructions sent with every feedback generation request.
"""

FEEDBACK_SYSTEM_INSTRUCTION = "You are a professional interviewer analyzing a mock interview."

FEEDBACK_PROMPT_TEMPLATE = """You are an AI interviewer analyzing a mock interview.
Evaluate the candidate in detail without leniency. Score each category from 0 to 100:
{categories}

Transcript:
{transcript}"""
