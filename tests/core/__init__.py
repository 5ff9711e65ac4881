# tests/core/__init__.py

"""
'app.core' 공통 모듈의 단위 테스트 패키지입니다.
"""
