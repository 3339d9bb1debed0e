"""
Arena module for running tournaments between move policies.
"""
from .arena import Arena, ELORatingSystem

__all__ = ['Arena', 'ELORatingSystem']
