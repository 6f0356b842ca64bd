"""형상 유사도 도메인 레이어 (값 객체, 예외, 기하 연산)."""
