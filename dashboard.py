import matplotlib.pyplot as plt
import matplotlib.patches as patches
import matplotlib.widgets as widgets
import requests

from martian_robots.entities.grid import MARS
from martian_robots.utils.enums import Heading

# CONFIGURATION
API_URL    = "http://localhost:5000"
ROBOTS_URL = f"{API_URL}/robots"
SCENTS_URL = f"{API_URL}/scents"
STATUS_URL = f"{API_URL}/status"

# Heading letter → arrow drawing params (adx, ady)
ARROW_LENGTH  = 0.6
HEADING_ARROW = {
    h.letter: (h.step[0] * ARROW_LENGTH, h.step[1] * ARROW_LENGTH) for h in Heading
}


class TrailViewer:
    """
    Read-only view of the robots on a running server.
    Draws every robot's trail, where it stands now, and the scents left
    behind by lost robots. Instructions are sent elsewhere; this only looks.
    """

    # =========================================================================
    # INIT
    # =========================================================================

    def __init__(self):
        self.robots   = []      # List of {id, result, lost, history}
        self.scents   = []      # List of {x, y}
        self.selected = None    # Index into self.robots, None = show all
        self.bounds   = MARS.get_dict()   # Replaced by the server's grid on refresh

        # ---- BUILD FIGURE ----
        self.fig, self.ax = plt.subplots(figsize=(14, 8))
        plt.subplots_adjust(bottom=0.18)

        self.btn_prev = widgets.Button(plt.axes([0.05, 0.05, 0.12, 0.06]), '<< Prev')
        self.btn_prev.on_clicked(self.prev_robot)

        self.btn_all = widgets.Button(plt.axes([0.19, 0.05, 0.12, 0.06]), 'All', color='lightgreen')
        self.btn_all.on_clicked(self.show_all)

        self.btn_next = widgets.Button(plt.axes([0.33, 0.05, 0.12, 0.06]), 'Next >>')
        self.btn_next.on_clicked(self.next_robot)

        self.btn_refresh = widgets.Button(plt.axes([0.52, 0.05, 0.16, 0.06]), 'Refresh', color='lightblue')
        self.btn_refresh.on_clicked(self.refresh)

        self.btn_clear = widgets.Button(plt.axes([0.71, 0.05, 0.16, 0.06]), 'Clear Scents', color='salmon')
        self.btn_clear.on_clicked(self.clear_scents)

        self.ax_status = plt.axes([0.05, 0.0, 0.9, 0.04])
        self.ax_status.axis('off')
        self.status_text = self.ax_status.text(
            0, 0.5, "Status: ready",
            transform=self.ax_status.transAxes,
            va='center', fontsize=8.5, color='gray'
        )

        self.refresh(None)
        plt.show()

    # =========================================================================
    # SERVER
    # =========================================================================

    def refresh(self, event):
        try:
            res = requests.get(STATUS_URL, timeout=5)
            res.raise_for_status()
            self.bounds = res.json()['grid']

            res = requests.get(ROBOTS_URL, timeout=5)
            res.raise_for_status()
            self.robots = []
            for summary in res.json():
                detail = requests.get(f"{ROBOTS_URL}/{summary['id']}", timeout=5)
                detail.raise_for_status()
                self.robots.append(detail.json())

            res = requests.get(SCENTS_URL, timeout=5)
            res.raise_for_status()
            self.scents = res.json()['scents']

            if self.selected is not None and self.selected >= len(self.robots):
                self.selected = None
            lost = sum(1 for r in self.robots if r['lost'])
            self._set_status(
                f"{len(self.robots)} robots ({lost} lost), {len(self.scents)} scents", "blue"
            )
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
        self.redraw()

    def clear_scents(self, event):
        try:
            res = requests.delete(SCENTS_URL, timeout=5)
            res.raise_for_status()
            self.scents = []
            self._set_status("Scents cleared.", "blue")
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
        self.redraw()

    # =========================================================================
    # SELECTION
    # =========================================================================

    def prev_robot(self, event):
        if not self.robots: return
        self.selected = (len(self.robots) - 1 if self.selected is None
                         else (self.selected - 1) % len(self.robots))
        self.redraw()

    def next_robot(self, event):
        if not self.robots: return
        self.selected = 0 if self.selected is None else (self.selected + 1) % len(self.robots)
        self.redraw()

    def show_all(self, event):
        self.selected = None
        self.redraw()

    def _set_status(self, msg, color="gray"):
        self.status_text.set_text(f"{msg}")
        self.status_text.set_color(color)

    # =========================================================================
    # REDRAW
    # =========================================================================

    def _draw_trail(self, robot, color, alpha):
        """Draw lines between consecutive positions in a robot's history."""
        history = robot['history']
        for p1, p2 in zip(history, history[1:]):
            if (p1['x'], p1['y']) == (p2['x'], p2['y']):
                continue        # turn on the spot
            style = '--' if p2['lost'] else '-'
            self.ax.plot(
                [p1['x'] + 0.5, p2['x'] + 0.5], [p1['y'] + 0.5, p2['y'] + 0.5],
                color=color, alpha=alpha, linestyle=style, linewidth=2, zorder=2
            )

        start = history[0]
        self.ax.plot(start['x'] + 0.5, start['y'] + 0.5, 'o', color=color, alpha=alpha, zorder=3)

    def _draw_robot(self, robot, color):
        last = robot['history'][-1]
        cx, cy = last['x'] + 0.5, last['y'] + 0.5

        if last['lost']:
            self.ax.text(cx, cy, "✖", color='red', fontsize=14,
                         ha='center', va='center', fontweight='bold', zorder=6)
        else:
            self.ax.add_patch(patches.Rectangle(
                (last['x'], last['y']), 1, 1, color=color, alpha=0.5, ec='black', zorder=4
            ))
            adx, ady = HEADING_ARROW[last['heading']]
            self.ax.arrow(cx, cy, adx, ady, color='blue', width=0.08, head_width=0.3, zorder=5)

        self.ax.text(cx, cy + 0.9, f"#{robot['id']}", color=color,
                     fontsize=8, fontweight='bold', ha='center', zorder=6)

    def redraw(self):
        self.ax.clear()
        min_x, min_y = self.bounds['min']['x'], self.bounds['min']['y']
        max_x, max_y = self.bounds['max']['x'], self.bounds['max']['y']
        self.ax.set_xlim(min_x - 2, max_x + 3)
        self.ax.set_ylim(min_y - 2, max_y + 3)
        self.ax.set_aspect('equal')
        self.ax.grid(True, linestyle=':', alpha=0.4)

        # Surface
        self.ax.add_patch(patches.Rectangle(
            (min_x, min_y), max_x - min_x + 1, max_y - min_y + 1,
            color='peru', alpha=0.15, ec='saddlebrown', lw=2, zorder=0
        ))

        # Scents
        for s in self.scents:
            self.ax.add_patch(patches.Circle(
                (s['x'] + 0.5, s['y'] + 0.5), 0.45, color='purple', alpha=0.4, zorder=1
            ))

        if self.selected is None:
            title = f"All robots: {len(self.robots)} | Scents: {len(self.scents)}"
            shown = self.robots
        else:
            robot = self.robots[self.selected]
            title = f"Robot #{robot['id']}: {robot['result']} | Moves: {len(robot['history']) - 1}"
            shown = [robot]
        self.ax.set_title(title, fontsize=10)

        cmap = plt.cm.tab10
        for i, robot in enumerate(shown):
            color = cmap(i % 10)
            self._draw_trail(robot, color, alpha=0.8 if self.selected is not None else 0.5)
            self._draw_robot(robot, color)

        self.fig.canvas.draw()


if __name__ == "__main__":
    viewer = TrailViewer()
