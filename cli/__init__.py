"""CLI package for the People & Books service"""
from .main import cli

__all__ = ['cli']
