"""AI 연동 계층"""
