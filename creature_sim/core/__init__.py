"""Creature Social Simulation Core"""
__version__ = "0.1.0"
