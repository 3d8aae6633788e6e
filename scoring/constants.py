# scoring/constants.py — 고정 임상 상수 (런타임 변경 불가)
from types import MappingProxyType

# 카테고리 고정 순서: 레이더 축, 주의 라벨, 요약표 모두 이 순서를 따른다
CATEGORY_ORDER = ("plaque", "perio", "interdental", "sensitivity", "arch", "motor")

MAX_SCORES = MappingProxyType({
    "plaque": 18,
    "perio": 48,
    "interdental": 12,
    "sensitivity": 3,
    "arch": 2,
    "motor": 1,
})

TOTAL_MAX = sum(MAX_SCORES.values())  # 84

# 주의 요약 문구용
WARNING_LABELS = MappingProxyType({
    "plaque": "치면세정능력",
    "perio": "치주건강도",
    "interdental": "치간관리",
    "sensitivity": "민감성",
    "arch": "악궁 크기",
    "motor": "손 운동기능",
})

# 레이더 축 라벨 (악궁크기는 축에서 붙여 쓴다)
AXIS_LABELS = MappingProxyType({
    "plaque": "치면세정능력",
    "perio": "치주건강도",
    "interdental": "치간관리",
    "sensitivity": "민감성",
    "arch": "악궁크기",
    "motor": "손 운동기능",
})

# 결과 목록 라벨
SCORE_LABELS = MappingProxyType({
    "plaque": "치면세정 점수",
    "perio": "치주건강 점수",
    "interdental": "치간관리 점수",
    "sensitivity": "시린이 점수",
    "arch": "악궁 사이즈",
    "motor": "손 운동기능 점수",
})

# 입력 개수
PLAQUE_SITES = 6
PERIO_TEETH = (16, 17, 26, 27, 36, 37, 46, 47)
PERIO_SITES_PER_TOOTH = 3  # mesial / mid / distal
PERIO_SITES = len(PERIO_TEETH) * PERIO_SITES_PER_TOOTH  # 24
INTERDENTAL_SITES = 4

# 주의 임계값
PLAQUE_WARNING_ABOVE = 6
PERIO_WARNING_DEPTH_ABOVE = 5
INTERDENTAL_WARNING_AT = 2
SENSITIVITY_WARNING_AT = 2
ARCH_WARNING_EQUALS = 2
MOTOR_WARNING_EQUALS = 1
