"""CLI package for books"""
from .main import cli

__all__ = ['cli']
