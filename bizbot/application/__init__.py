"""
Application layer: service orchestrators and their wiring.
"""
