# app.py — 구강위생용품 진단 프로그램 (Streamlit)
# - 0~7 페이지: 시작 → 진단 정보 → 치면세정 → 치주 → 치간 → 민감성 → 악궁/손 운동 → 결과
# - 입력 완료 여부와 상관없이 이전/다음 이동 가능
# - 결과: 레이더 차트, 주의 항목, 워터마크 이미지 저장, CSV 요약
# - 환자 기록은 저장하지 않음 (세션 종료/처음으로 → 폐기)

import os, sys

import streamlit as st

# ─────────────────────────────────────────────────────────────
# Project path
# ─────────────────────────────────────────────────────────────
ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# ─────────────────────────────────────────────────────────────
# Internal modules
# ─────────────────────────────────────────────────────────────
from scoring.engine import compute_report
from utils.chart import build_radar_spec, render_radar
from utils.export import (
    ExportError,
    build_summary_frame,
    export_report,
    summary_csv,
    summary_lines,
)
from utils.logging_config import get_logger
from utils.registry import load_survey
from utils.wizard import WizardState, LAST_PAGE

logger = get_logger("app")

st.set_page_config(
    page_title="구강위생용품 진단 프로그램",
    layout="centered",
    initial_sidebar_state="collapsed"
)

SURVEY = load_survey()

# 위젯 key 접두어 (처음으로 이동 시 일괄 삭제)
WIDGET_PREFIXES = ("w_", "export_")


# ─────────────────────────────────────────────────────────────
# State
# ─────────────────────────────────────────────────────────────
def init_state():
    if "wizard" not in st.session_state:
        st.session_state.wizard = WizardState()


def clear_widgets():
    for k in list(st.session_state.keys()):
        if str(k).startswith(WIDGET_PREFIXES):
            del st.session_state[k]


init_state()
wizard: WizardState = st.session_state.wizard
a = wizard.assessment


# ─────────────────────────────────────────────────────────────
# Callbacks (한 번의 사용자 동작 = 한 번의 변경)
# ─────────────────────────────────────────────────────────────
def _on_identity(field, key):
    wizard.set_identity(**{field: st.session_state[key]})


def _on_plaque(idx, key, level_map):
    wizard.set_plaque(idx, level_map.get(st.session_state[key], 0))


def _on_perio(idx, key):
    wizard.set_perio(idx, st.session_state[key])


def _on_interdental(idx, key):
    wizard.set_interdental(idx, int(st.session_state[key]))


def _on_single(setter, key):
    getattr(wizard, setter)(int(st.session_state[key]))


def nav_buttons(prev_label="이전", next_label="다음"):
    c1, c2 = st.columns(2)
    if prev_label and c1.button(prev_label, key=f"nav_prev_{wizard.page}"):
        wizard.retreat(); st.rerun()
    if next_label and c2.button(next_label, type="primary", key=f"nav_next_{wizard.page}"):
        wizard.advance(); st.rerun()


def progress():
    if 1 <= wizard.page < LAST_PAGE:
        st.progress(wizard.page / (LAST_PAGE - 1))
        st.caption(f"{wizard.page} / {LAST_PAGE - 1} · {wizard.title}")


def criteria(lines):
    st.markdown("\n".join(f"- {x}" for x in lines))


def _index(options, value):
    return options.index(value) if value in options else 0


progress()

# ─────────────────────────────────────────────────────────────
# PAGE 0 — Intro
# ─────────────────────────────────────────────────────────────
if wizard.page == 0:
    intro = SURVEY["intro"]
    st.title(intro["title"])
    st.write(intro["author"])
    if st.button(intro["start_label"], type="primary"):
        wizard.go_to(1); st.rerun()

# ─────────────────────────────────────────────────────────────
# PAGE 1 — 진단 정보 (검증 없음)
# ─────────────────────────────────────────────────────────────
elif wizard.page == 1:
    sec = SURVEY["identity"]
    st.header(sec["title"])
    st.text_input(sec["name_label"], value=a.name, key="w_name",
                  on_change=_on_identity, args=("name", "w_name"))
    st.text_input(sec["chart_label"], value=a.chart_number, key="w_chart",
                  on_change=_on_identity, args=("chart_number", "w_chart"))
    st.text_input(sec["date_label"], value=a.date, key="w_date", placeholder="yyyy-mm-dd",
                  on_change=_on_identity, args=("date", "w_date"))
    nav_buttons()

# ─────────────────────────────────────────────────────────────
# PAGE 2 — 치면세정 능력
# ─────────────────────────────────────────────────────────────
elif wizard.page == 2:
    sec = SURVEY["plaque"]
    st.header(sec["title"])
    st.write(sec["description"])
    labels = [lv[0] for lv in sec["levels"]]
    level_map = {lv[0]: lv[1] for lv in sec["levels"]}
    score_to_label = {lv[1]: lv[0] for lv in sec["levels"]}

    for group in sec["groups"]:
        st.subheader(group["label"])
        cols = st.columns(len(group["indices"]))
        for col, idx in zip(cols, group["indices"]):
            with col:
                key = f"w_plaque_{idx}"
                current = score_to_label.get(a.plaque[idx], labels[0])
                st.radio(f"#{sec['teeth'][idx]}", labels, index=_index(labels, current), key=key,
                         on_change=_on_plaque, args=(idx, key, level_map))
    nav_buttons()

# ─────────────────────────────────────────────────────────────
# PAGE 3 — 치주건강도 (probing depth 자유 입력)
# ─────────────────────────────────────────────────────────────
elif wizard.page == 3:
    sec = SURVEY["perio"]
    st.header(sec["title"])
    for line in sec["description"]:
        st.write(line)

    head = st.columns(len(sec["sites"]) + 1)
    head[0].markdown("**치아**")
    for c, site in zip(head[1:], sec["sites"]):
        c.markdown(f"**{site}**")

    n_sites = len(sec["sites"])
    for t_idx, tooth in enumerate(sec["teeth"]):
        row = st.columns(n_sites + 1)
        row[0].markdown(f"#{tooth}")
        for pos in range(n_sites):
            idx = t_idx * n_sites + pos
            key = f"w_perio_{idx}"
            row[pos + 1].text_input(f"#{tooth} {sec['sites'][pos]}", value=a.perio[idx], key=key,
                                    label_visibility="collapsed",
                                    on_change=_on_perio, args=(idx, key))
    nav_buttons()

# ─────────────────────────────────────────────────────────────
# PAGE 4 — 치간
# ─────────────────────────────────────────────────────────────
elif wizard.page == 4:
    sec = SURVEY["interdental"]
    st.header(sec["title"])
    st.write("점수 기준:")
    criteria(sec["criteria"])
    for idx, site in enumerate(sec["sites"]):
        key = f"w_interdental_{idx}"
        st.number_input(site, min_value=0, max_value=3, step=1, value=int(a.interdental[idx]),
                        key=key, on_change=_on_interdental, args=(idx, key))
    nav_buttons()

# ─────────────────────────────────────────────────────────────
# PAGE 5 — 민감성
# ─────────────────────────────────────────────────────────────
elif wizard.page == 5:
    sec = SURVEY["sensitivity"]
    st.header(sec["title"])
    st.write("점수 기준:")
    criteria(sec["criteria"])
    choices = sec["choices"]
    st.radio("민감성 점수", choices, index=_index(choices, a.sensitivity), key="w_sensitivity",
             format_func=lambda v: f"{v}점", on_change=_on_single, args=("set_sensitivity", "w_sensitivity"))
    nav_buttons()

# ─────────────────────────────────────────────────────────────
# PAGE 6 — 악궁 / 손 운동기능
# ─────────────────────────────────────────────────────────────
elif wizard.page == 6:
    sec = SURVEY["arch_motor"]
    st.header(sec["title"])

    st.write("악궁의 크기 기준:")
    criteria(sec["arch_criteria"])
    arch_choices = sec["arch_choices"]
    st.radio("악궁 점수", arch_choices, index=_index(arch_choices, a.arch), key="w_arch",
             format_func=lambda v: f"{v}점", on_change=_on_single, args=("set_arch", "w_arch"))

    st.write("손 운동기능 평가 기준:")
    criteria(sec["motor_criteria"])
    motor_choices = sec["motor_choices"]
    st.radio("손 운동기능 점수", motor_choices, index=_index(motor_choices, a.motor), key="w_motor",
             format_func=lambda v: f"{v}점", on_change=_on_single, args=("set_motor", "w_motor"))
    nav_buttons()

# ─────────────────────────────────────────────────────────────
# PAGE 7 — 결과 요약
# ─────────────────────────────────────────────────────────────
elif wizard.page == LAST_PAGE:
    sec = SURVEY["summary"]
    report = compute_report(a)
    lines = summary_lines(a, report)

    st.header(sec["title"])
    for line in lines["identity"]:
        key, _, val = line.partition(": ")
        st.markdown(f"**{key}:** {val}")

    fig = render_radar(build_radar_spec(report, sec["dataset_label"]))
    st.pyplot(fig)

    st.markdown(f"**{lines['total']}**")
    st.markdown("\n".join(f"- {x}" for x in lines["items"]))
    if report.warning_labels:
        st.error(f"⚠️ **주의 요약:** {', '.join(report.warning_labels)} {sec['warning_suffix']}")

    with st.expander("점수표", expanded=False):
        st.table(build_summary_frame(report))

    c1, c2, c3 = st.columns(3)
    if c1.button("이전으로"):
        st.session_state.pop("export_result", None)
        wizard.retreat(); st.rerun()

    if c2.button(sec["save_label"], type="primary"):
        try:
            with st.spinner("이미지 생성 중..."):
                st.session_state.export_result = export_report(a, report)
        except ExportError as e:
            logger.exception("image export failed")
            st.session_state.pop("export_result", None)
            st.error(f"이미지 저장 실패: {e}")

    res = st.session_state.get("export_result")
    if res is not None:
        c2.download_button("📥 PNG 다운로드", data=res.png, file_name=res.filename, mime=res.mime)

    c3.download_button(f"📥 {sec['csv_label']}", data=summary_csv(a, report),
                       file_name="oral_hygiene_summary.csv", mime="text/csv")

    st.divider()
    if st.button("처음으로"):
        wizard.restart()
        clear_widgets()
        st.rerun()

else:
    st.write("페이지가 준비되지 않았습니다.")
