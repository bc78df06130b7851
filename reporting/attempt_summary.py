"""多次 attempt（pytest-rerunfailures）汇总：Retry Insight + Attempt Diff，最终以 HTML attach 到 allure"""
from collections import Counter
from html import escape

import allure


def build_retry_insight(attempts: list[dict]) -> list[str]:
    """根据各次 attempt 的状态、错误、URL 归纳重试结论"""
    statuses = Counter(a["status"] for a in attempts)
    failed = [a for a in attempts if a["status"] == "FAILED"]
    errors = {a["error"] for a in failed if a.get("error")}
    urls = {a["url"] for a in failed if a.get("url")}

    insight = []
    if failed and statuses["PASSED"]:
        first_pass = next(a["attempt"] for a in attempts if a["status"] == "PASSED")
        insight.append(f"• Flaky: failed {len(failed)}x, passed on attempt {first_pass}")
    elif attempts and len(failed) == len(attempts):
        insight.append(f"• Consistently failing: {len(failed)}/{len(attempts)} attempts")

    if len(errors) == 1:
        insight.append("• Identical error on every failed attempt")
    elif errors:
        insight.append(f"• {len(errors)} distinct errors across failed attempts")

    if len(urls) > 1:
        insight.append(f"• Failures spread over {len(urls)} URLs")
    return insight


def compare_field(attempts: list[dict], field: str) -> str:
    """ 比较同一字段在不同 attempts 中的差异，无差异返回空字符串 """
    unique_values = {attempt.get(field) for attempt in attempts}
    return "\n".join(sorted(map(str, unique_values))) if len(unique_values) > 1 else ""


def compare_attachments(attempts: list[dict]) -> str:
    attachment_diff = []
    for field in ["has_screenshot", "has_video", "has_trace"]:
        unique_values = {attempt.get(field) for attempt in attempts}
        if len(unique_values) > 1:
            attachment_diff.append(f"{field} difference: {', '.join(sorted(map(str, unique_values)))}")
    return ", ".join(attachment_diff)


def calculate_attempt_diff(attempts: list[dict]) -> str:
    sections = [
        ("🛑 Error Differences", compare_field(attempts, "error")),
        ("🌍 URL Differences", compare_field(attempts, "url")),
        ("🕣 Duration Differences", compare_field(attempts, "duration")),
        ("📎 Attachment Differences", compare_attachments(attempts)),
    ]
    return "".join(
        f"<details><summary>{summary}</summary><pre>{escape(content)}</pre></details>"
        for summary, content in sections if content)


def render_attempt_chain(attempts: list[dict]) -> str:
    badges = [f'Attempt {a["attempt"]} {"❌" if a["status"] == "FAILED" else "✅"}' for a in attempts]
    return " → ".join(badges)


def render_attempt_card(a: dict) -> str:
    artifacts = "".join(
        f"{'✔️' if a.get(key) else '❌'} {label}<br/>"
        for key, label in [("has_screenshot", "Screenshot"), ("has_video", "Video"), ("has_trace", "Trace")])
    return f"""
    <div class="card">
      <h3>Attempt {a['attempt']} {'❌ FAILED' if a['status'] == 'FAILED' else '✅ PASSED'}</h3>
      <div>🕑 Duration: <b>{a['duration']}s</b></div>
      <div>💥 Error: <pre>{escape(a.get('error') or '-')}</pre></div>
      <div>🌏 URL: {escape(a.get('url') or '-')}</div>
      <div>{artifacts}</div>
    </div>
    """


def render_attempt_summary(attempts: list[dict]) -> str:
    insight = "".join(f"<li>{line}</li>" for line in build_retry_insight(attempts))
    diff = calculate_attempt_diff(attempts) or "<p>No differences</p>"
    cards = "".join(render_attempt_card(a) for a in attempts)
    return f"""<!DOCTYPE html>
<html>
<head>
<style>
  body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Arial; color: #333; }}
  .retry-insight {{ padding: 12px 16px; border-left: 4px solid #f0ad4e; background: #fff8e1; }}
  .retry-insight ul {{ list-style: none; padding-left: 0; }}
  .attempt-diff {{ margin: 16px 0; padding: 12px; border-left: 4px solid #64b5f6; background: #f5f7fa; }}
  .card {{ margin-top: 8px; padding: 16px; border: 1px solid #ddd; border-radius: 5px; }}
  pre {{ white-space: pre-wrap; font-size: 12px; }}
</style>
</head>
<body>
<h2>🔁 Attempt Summary</h2>
<div class="retry-insight"><h3>🧠 Retry Insight</h3><ul>{insight}</ul></div>
<div class="attempt-diff"><h3>🔍 Attempt Diff Analysis</h3>{diff}</div>
<div class="chain">{render_attempt_chain(attempts)}</div>
{cards}
</body>
</html>
"""


def attach_attempt_summary(attempts: list[dict]):
    allure.attach(render_attempt_summary(attempts), name="Attempt Summary",
                  attachment_type=allure.attachment_type.HTML)
