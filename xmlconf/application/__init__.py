# Application Layer

"""
应用层 - 业务用例
"""
