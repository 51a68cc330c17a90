"""UI 模块"""
