"""
Chart document builder.

Produces the Plotly figure description consumed by the bundled chart page:
a single CPU trace plus a fixed layout.
"""
import json
from datetime import datetime
from typing import Any, Dict, TextIO

from psprofile.consts.formats import TIME_FORMAT
from psprofile.models.table import Table

CHART_TITLE = "Cpu Usage over time"
X_AXIS_TITLE = "heure"
Y_AXIS_TITLE = "cpu usage %"
Y_AXIS_COLOR = "blue"
Y_AXIS_RANGE = [0, 500]

# Fixed x-axis window, not derived from the data
X_AXIS_MIN = "10:58:26"
X_AXIS_MAX = "18:14:58"


def _chart_time(value: datetime) -> str:
    return value.isoformat()


def build_chart(table: Table) -> Dict[str, Any]:
    """Build the chart document for the given table."""
    x_min = datetime.strptime(X_AXIS_MIN, TIME_FORMAT)
    x_max = datetime.strptime(X_AXIS_MAX, TIME_FORMAT)

    return {
        "data": [
            {
                "x": [_chart_time(d) for d in table.date],
                "y": list(table.cpu_percent),
                "name": "cpu",
                "mode": "line",
                "type": "scatter",
            }
        ],
        "layout": {
            "title": CHART_TITLE,
            "xaxis": {
                "type": "date",
                "title": X_AXIS_TITLE,
                "range": [_chart_time(x_min), _chart_time(x_max)],
            },
            "yaxis": {
                "type": "linear",
                "title": Y_AXIS_TITLE,
                "color": Y_AXIS_COLOR,
                "range": list(Y_AXIS_RANGE),
            },
        },
    }


def encode_chart(table: Table) -> str:
    """
    Encode the chart document as a JSON line.

    Raises:
        ValueError: If a value cannot be encoded (NaN or infinite usage)
    """
    return json.dumps(build_chart(table), allow_nan=False) + "\n"


def write_chart(table: Table, stream: TextIO) -> None:
    """
    Encode the chart document and write it to `stream`. Nothing is written
    if encoding fails.

    Raises:
        ValueError: If a value cannot be encoded (NaN or infinite usage)
        OSError: If writing to the stream fails
    """
    stream.write(encode_chart(table))
