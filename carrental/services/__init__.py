"""서비스 패키지: 유스케이스 계층.

Service package: one service per aggregate (cars, customers, employees,
reservations, rentals). Each use case returns a Result and leaves the
commit to the router.
"""
