import os

# 헤드리스 CI에서도 위젯 테스트가 돌도록
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
