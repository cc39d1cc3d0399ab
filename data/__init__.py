"""数据加载模块"""
from .data_loader import load_expressions

__all__ = ['load_expressions']
