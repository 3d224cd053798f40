"""API 요청/응답 스키마 (pydantic)"""
