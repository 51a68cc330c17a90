# Domain Layer

"""
领域层 - 实体与接口
"""
