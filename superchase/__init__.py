"""
Super Chase - single-innings T20 run-chase simulator
"""
__version__ = "0.1.0"
