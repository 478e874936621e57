import argparse

import matplotlib.pyplot as plt
import matplotlib.patches as patches
import matplotlib.widgets as widgets
import requests
import numpy as np

from mission.commands.parser import parse_grid_line
from mission.utils.consts import API_URL
from mission.utils.errors import MissionDataError

# CONFIGURATION
DEFAULT_GRID_WIDTH  = 5
DEFAULT_GRID_HEIGHT = 5

ORIENTATIONS = ['N', 'E', 'S', 'W']
# Orientation letter → arrow drawing params (dx, dy) relative to cell centre
POSE_ARROW = {'N': (0, 0.3), 'E': (0.3, 0), 'S': (0, -0.3), 'W': (-0.3, 0)}
ROVER_COLORS = ['tab:blue', 'tab:orange', 'tab:green', 'tab:purple', 'tab:brown', 'tab:pink']


def coverage_map(results, grid_width, grid_height):
    """Count, per cell, how many rovers visited it. Off-grid cells are ignored."""
    heat = np.zeros((grid_height + 1, grid_width + 1), dtype=int)
    for r in results:
        for x, y in r.get('visited', []):
            if 0 <= x <= grid_width and 0 <= y <= grid_height:
                heat[y, x] += 1
    return heat


class InteractiveDashboard:

    # =========================================================================
    # INIT
    # =========================================================================

    def __init__(self, grid_width=DEFAULT_GRID_WIDTH, grid_height=DEFAULT_GRID_HEIGHT):
        # --- Grid ---
        self.grid_width  = grid_width
        self.grid_height = grid_height

        # --- Mission input ---
        self.rovers_in = [             # List of {x, y, o, instructions}
            {'x': 1, 'y': 2, 'o': 'N', 'instructions': 'LMLMLMLMM'},
            {'x': 3, 'y': 3, 'o': 'E', 'instructions': 'MMRMMRMRRM'},
        ]

        # --- Mission result ---
        self.results  = []             # RoverOutput dicts from the server
        self.selected = 0              # Index into results

        # ---- BUILD FIGURE ----
        self.fig, self.ax = plt.subplots(figsize=(9, 11))
        plt.subplots_adjust(bottom=0.26)

        self.btn_prev = widgets.Button(plt.axes([0.05, 0.14, 0.12, 0.06]), '<< Prev')
        self.btn_prev.on_clicked(self.prev_rover)

        self.btn_next = widgets.Button(plt.axes([0.19, 0.14, 0.12, 0.06]), 'Next >>')
        self.btn_next.on_clicked(self.next_rover)

        self.btn_run = widgets.Button(plt.axes([0.52, 0.14, 0.20, 0.06]), 'Run Mission', color='lightblue')
        self.btn_run.on_clicked(self.run_mission)

        self.btn_clear = widgets.Button(plt.axes([0.75, 0.14, 0.12, 0.06]), 'Clear', color='salmon')
        self.btn_clear.on_clicked(self.clear_all)

        # Instructions applied to the next rover placed by clicking
        self.txt_instr = widgets.TextBox(plt.axes([0.20, 0.06, 0.20, 0.05]), 'Instructions ', initial='M')

        # "<width> <height>", applied on Enter
        self.txt_grid = widgets.TextBox(plt.axes([0.48, 0.06, 0.10, 0.05]), 'Grid ',
                                        initial=f"{self.grid_width} {self.grid_height}")
        self.txt_grid.on_submit(self.set_grid_size)

        self.ax_status = plt.axes([0.62, 0.06, 0.35, 0.05])
        self.ax_status.axis('off')
        self.status_text = self.ax_status.text(
            0, 0.5, "Status: ready",
            transform=self.ax_status.transAxes,
            va='center', fontsize=8.5, color='gray',
            wrap=True
        )

        self.cid = self.fig.canvas.mpl_connect('button_press_event', self.on_click)
        self.redraw()
        plt.show()

    # =========================================================================
    # GRID SIZE
    # =========================================================================

    def set_grid_size(self, text):
        try:
            self.grid_width, self.grid_height = parse_grid_line(text)
        except MissionDataError as e:
            self.set_status(f"Bad grid size: {e}", color='red')
            return

        # Results were computed for the old grid
        self.results = []
        self.selected = 0
        self.set_status(f"Grid set to {self.grid_width}x{self.grid_height}")
        self.redraw()

    # =========================================================================
    # ROVER SELECTION
    # =========================================================================

    def prev_rover(self, event):
        if not self.results: return
        self.selected = (self.selected - 1) % len(self.results)
        self.redraw()

    def next_rover(self, event):
        if not self.results: return
        self.selected = (self.selected + 1) % len(self.results)
        self.redraw()

    # =========================================================================
    # ROVER PLACEMENT (grid clicks)
    # =========================================================================

    def on_click(self, event):
        if event.inaxes != self.ax: return
        x, y = int(round(event.xdata)), int(round(event.ydata))
        if not (0 <= x <= self.grid_width and 0 <= y <= self.grid_height): return

        idx = next((i for i, r in enumerate(self.rovers_in) if r['x'] == x and r['y'] == y), -1)
        if event.button == 3:           # right-click → remove
            if idx != -1:
                self.rovers_in.pop(idx)
        elif idx != -1:                 # left-click on a rover → rotate it
            r = self.rovers_in[idx]
            r['o'] = ORIENTATIONS[(ORIENTATIONS.index(r['o']) + 1) % 4]
        else:                           # left-click on empty cell → new rover
            self.rovers_in.append({'x': x, 'y': y, 'o': 'N', 'instructions': self.txt_instr.text.strip().upper()})

        self.results = []
        self.selected = 0
        self.set_status(f"{len(self.rovers_in)} rover(s) queued")
        self.redraw()

    # =========================================================================
    # SERVER CALLS
    # =========================================================================

    def run_mission(self, event):
        payload = {
            'grid_width': self.grid_width,
            'grid_height': self.grid_height,
            'rovers': self.rovers_in,
        }
        try:
            resp = requests.post(API_URL, json=payload, timeout=5)
            resp.raise_for_status()
        except requests.RequestException as e:
            self.set_status(f"Server error: {e}", color='red')
            return

        data = resp.json()
        self.results = data['rovers']
        self.selected = 0
        self.set_status("Output: " + " | ".join(data['output']), color='green')
        self.redraw()

    def clear_all(self, event):
        self.rovers_in = []
        self.results = []
        self.selected = 0
        self.set_status("Status: ready")
        self.redraw()

    def set_status(self, text, color='gray'):
        self.status_text.set_text(text)
        self.status_text.set_color(color)
        self.fig.canvas.draw_idle()

    # =========================================================================
    # DRAWING
    # =========================================================================

    def redraw(self):
        self.ax.clear()
        self.ax.set_xlim(-0.5, self.grid_width + 0.5)
        self.ax.set_ylim(-0.5, self.grid_height + 0.5)
        self.ax.set_xticks(range(self.grid_width + 1))
        self.ax.set_yticks(range(self.grid_height + 1))
        self.ax.set_aspect('equal')
        self.ax.grid(True, linestyle=':', alpha=0.4)

        if self.results:
            heat = coverage_map(self.results, self.grid_width, self.grid_height)
            self.ax.imshow(
                np.ma.masked_equal(heat, 0), origin='lower', cmap='Greens', alpha=0.5,
                extent=(-0.5, self.grid_width + 0.5, -0.5, self.grid_height + 0.5), vmin=0, vmax=max(1, heat.max())
            )
            for i, r in enumerate(self.results):
                self.draw_rover(r['x'], r['y'], r['o'], ROVER_COLORS[i % len(ROVER_COLORS)],
                                highlight=(i == self.selected), rejected=not r['deployed'])
            sel = self.results[self.selected]
            if sel['deployed']:
                title = (f"Rover {sel['id']}: ({sel['x']}, {sel['y']}, {sel['o']})  "
                         f"coverage {sel['coverage']:.1f}%  rollbacks {len(sel['rollbacks'])}")
            else:
                title = f"Rover {sel['id']}: rejected ({sel['rejection_reason']})"
            self.ax.set_title(title, fontsize=10)
        else:
            for i, r in enumerate(self.rovers_in):
                self.draw_rover(r['x'], r['y'], r['o'], ROVER_COLORS[i % len(ROVER_COLORS)])
            self.ax.set_title(f"Grid {self.grid_width}x{self.grid_height}  (click to place rovers)", fontsize=10)

        self.fig.canvas.draw_idle()

    def draw_rover(self, x, y, o, color, highlight=False, rejected=False):
        body = patches.Rectangle(
            (x - 0.3, y - 0.3), 0.6, 0.6,
            facecolor='none' if rejected else color,
            edgecolor='red' if rejected else ('black' if highlight else color),
            linewidth=2.5 if highlight else 1,
            linestyle='--' if rejected else '-',
        )
        self.ax.add_patch(body)
        dx, dy = POSE_ARROW[o]
        self.ax.arrow(x, y, dx, dy, head_width=0.15, color='black')


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Interactive rover mission dashboard.")
    parser.add_argument("--width", type=int, default=DEFAULT_GRID_WIDTH, help="Grid width (x axis).")
    parser.add_argument("--height", type=int, default=DEFAULT_GRID_HEIGHT, help="Grid height (y axis).")
    args = parser.parse_args()

    InteractiveDashboard(args.width, args.height)
