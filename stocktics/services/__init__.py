"""
서비스 패키지
- 알림 파생, 배송 트래커, 이메일 스텁, 인벤토리 컨트롤러, 재입고 워크플로
"""
