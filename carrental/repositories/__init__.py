"""레포지토리 패키지: 테이블별 쿼리와 도메인 매핑.

Repository package: per-table queries, ORM to aggregate mappers for
reservations and rentals, and the capacity/overlap sources the conflict
policy reads.
"""
