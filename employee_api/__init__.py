"""직원 관리 API 패키지.

Employee management API package.
"""
