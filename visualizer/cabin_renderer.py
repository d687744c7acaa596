"""
Cabin Renderer

Draws the current seat occupancy and aisle-resident passengers of an
AisleSimulator with matplotlib. Reads simulator state only; the engine has
no knowledge of this module.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from simulator.core.passenger import PassengerState

FREE_SEAT_COLOR = 'white'
OCCUPIED_SEAT_COLOR = 'green'
PASSENGER_COLOR = 'green'
WAITING_PASSENGER_COLOR = 'orange'


class CabinRenderer:
    """
    Matplotlib view of a boarding simulator

    Usage:
        renderer = CabinRenderer(simulator)
        renderer.save_snapshot('cabin.png')
    """

    def __init__(self, simulator):
        self.simulator = simulator

    def draw(self, ax):
        """Draw seats and aisle-resident passengers onto ax"""
        grid = self.simulator.seat_grid
        layout = grid.layout

        ax.clear()
        for row, col, seat in grid:
            color = OCCUPIED_SEAT_COLOR if seat.occupied else FREE_SEAT_COLOR
            ax.add_patch(Rectangle((grid.seat_x(col), grid.row_position(row)),
                                   layout.seat_width, layout.seat_height,
                                   facecolor=color, edgecolor='gray', linewidth=0.5))

        # Passengers walk down the aisle centre line
        aisle_x = self.simulator.origin_x + layout.aisle_width / 2
        for passenger in self.simulator.passengers:
            if not passenger.is_in_aisle():
                continue
            color = PASSENGER_COLOR if passenger.state == PassengerState.IN_AISLE else WAITING_PASSENGER_COLOR
            ax.add_patch(Circle((aisle_x, passenger.position + passenger.RADIUS), passenger.RADIUS,
                                facecolor=color, edgecolor='black', linewidth=0.5))

        left = grid.seat_x(0) - layout.seat_width
        right = grid.seat_x(grid.seats_per_row - 1) + 2 * layout.seat_width
        bottom = grid.row_position(grid.num_rows - 1) + 2 * layout.seat_height
        ax.set_xlim(left, max(right, aisle_x + layout.aisle_width))
        # Row 0 at the top, like looking down the cabin from the door
        ax.set_ylim(bottom, layout.start_y - 2 * layout.seat_height)
        ax.set_aspect('equal')
        ax.axis('off')
        ax.set_title(f"t = {self.simulator.now:.2f}s   seated {self.simulator.seated_count()}/{len(self.simulator.passengers)}")

    def save_snapshot(self, output_filename='cabin_snapshot.png', show=False):
        fig, ax = plt.subplots(figsize=(6, 10))
        self.draw(ax)
        fig.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Cabin snapshot saved to: {output_filename}")
        if show:
            plt.show()
        plt.close(fig)
