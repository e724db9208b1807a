"""
Seasonal Activity Chart
=======================

Renders monthly sighting counts as a line chart using matplotlib.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.ticker import MaxNLocator  # noqa: E402

from ticksight.models.sighting import SeasonalActivity  # noqa: E402

LINE_COLOR = "#2563eb"
FILL_COLOR = (37 / 255, 99 / 255, 235 / 255, 0.1)


def plot_seasonal_activity(
    activity: SeasonalActivity,
    output_path: Union[str, Path],
    figsize: Tuple[float, float] = (10, 5),
    dpi: int = 150,
    title: Optional[str] = None,
) -> str:
    """
    Save the seasonal activity chart as an image.

    Args:
        activity: Monthly counts to plot
        output_path: Destination file (.png or .jpg)
        figsize: Figure size in inches
        dpi: Output resolution
        title: Chart title (default: activity.title)

    Returns:
        Path to the saved image
    """
    fig, ax = plt.subplots(figsize=figsize)

    x = list(range(len(activity.labels)))
    ax.plot(x, activity.counts, color=LINE_COLOR, marker="o", markersize=5, label="Tick Sightings")
    ax.fill_between(x, activity.counts, color=FILL_COLOR)

    ax.set_xticks(x)
    ax.set_xticklabels(activity.labels)
    ax.set_xlabel("Month")
    ax.set_ylabel("Number of Sightings")
    ax.set_ylim(bottom=0)
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_title(title or activity.title, fontsize=16, fontweight="bold")
    ax.legend(loc="upper center")

    plt.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    save_kwargs = {"dpi": dpi, "bbox_inches": "tight"}
    if output_path.suffix.lower() in (".jpg", ".jpeg"):
        save_kwargs["format"] = "jpeg"
    else:
        save_kwargs["format"] = "png"

    fig.savefig(output_path, **save_kwargs)
    plt.close(fig)

    return str(output_path)
