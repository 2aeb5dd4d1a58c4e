"""
Agentic system: LLM-backed answer generation.
"""
