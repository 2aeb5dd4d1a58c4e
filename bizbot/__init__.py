"""
bizbot: document-grounded chatbots for small businesses.

Ingests uploaded business documents into embedded chunks and answers
customer questions from them.
"""

__version__ = "0.1.0"
