import html

SLOT_STYLE = """
    <style>
        .timer-container {
            padding: 10px;
            background: #f0f2f6;
            border-radius: 5px;
            margin-bottom: 20px;
            font-family: "Source Sans Pro", sans-serif;
            text-align: center;
        }
        .timer {
            font-size: 2.5rem;
            font-weight: 600;
            color: rgb(49, 51, 63);
        }
        .timer-label {
            font-size: 0.9rem;
            color: rgba(49, 51, 63, 0.7);
        }
        .timer-expired {
            font-size: 1.5rem;
            font-weight: 700;
            text-align: center;
            color: rgb(255, 75, 75);
        }
    </style>
"""


def slot_html(slot_id: str, value: str, label: str) -> str:
    return f"""
        <div class="timer-container">
            <div id="{html.escape(slot_id)}" class="timer">{html.escape(value)}</div>
            <div class="timer-label">{html.escape(label)}</div>
        </div>
    """


def message_html(slot_id: str, text: str) -> str:
    return f'<div id="{html.escape(slot_id)}" class="timer-expired">⏱️ {html.escape(text)}</div>'
