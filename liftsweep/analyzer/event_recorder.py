import json
import re
from datetime import datetime

import matplotlib.pyplot as plt


class EventRecorder:
    """
    Receives all broker traffic and records what the car did, as an
    independent "recorder".

    Collects:
    - An event log in JSON Lines form for offline playback
    - The car trajectory as (time, floor) points
    - Service time of every hall call (button ON to button OFF)
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.event_log = []
        self.simulation_metadata = {}
        self.trajectory = []  # [(time, floor)]
        self.states = []  # [(time, state)]
        self.hall_call_on_times = {}  # {(floor, direction): press_time}
        self.service_times = {}  # {(floor, direction): [(press_time, service_time), ...]}

    def _add_event_log(self, event_type, event_data):
        self.event_log.append({
            "time": self.env.now,
            "type": event_type,
            "data": event_data
        })

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def _record_floor(self, timestamp, floor):
        if not self.trajectory or self.trajectory[-1][1] != floor:
            self.trajectory.append((timestamp, floor))

    def start_listening(self):
        """
        Main process to start intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()

            topic = data.get('topic', '')
            message = data.get('message', {})
            timestamp = message.get('timestamp', self.env.now)

            if re.search(r'elevator/(.*?)/status', topic):
                self._record_floor(timestamp, message.get('current_floor'))
                if not self.states or self.states[-1][1] != message.get('state'):
                    self.states.append((timestamp, message.get('state')))
                self._add_event_log('elevator_status', message)
                continue

            transition_match = re.search(r'elevator/(.*?)/transition', topic)
            if transition_match:
                if message.get('event_type') == 'TRANSITION_END':
                    self._record_floor(timestamp, message.get('to_floor'))
                self._add_event_log(message.get('event_type', 'transition').lower(), message)
                continue

            if re.search(r'elevator/(.*?)/(service|sweep)', topic):
                self._add_event_log(message.get('event_type', 'unknown').lower(), message)
                continue

            call_match = re.search(r'hall_button/floor_(.*?)/call_(on|off)', topic)
            if call_match:
                floor = int(call_match.group(1))
                key = (floor, message.get('direction'))
                if call_match.group(2) == 'on':
                    self.hall_call_on_times.setdefault(key, timestamp)
                    self._add_event_log('hall_call_on', message)
                else:
                    press_time = self.hall_call_on_times.pop(key, None)
                    if press_time is not None:
                        self.service_times.setdefault(key, []).append((press_time, timestamp - press_time))
                    self._add_event_log('hall_call_off', message)

    def events_of_type(self, event_type):
        return [event for event in self.event_log if event['type'] == event_type]

    def all_service_times(self):
        """Flat list of service times of every served call"""
        return [service for records in self.service_times.values() for _, service in records]

    def print_summary(self):
        """Print served calls, waiting calls and service time statistics"""
        print("\n" + "=" * 60)
        print("   HALL CALL SERVICE SUMMARY")
        print("=" * 60)

        times = self.all_service_times()
        if times:
            print(f"  Served:  {len(times):>6} calls")
            print(f"  Average: {sum(times) / len(times):>9.2f} ms")
            print(f"  Min:     {min(times):>9.2f} ms")
            print(f"  Max:     {max(times):>9.2f} ms")
        else:
            print("  No calls were served.")

        if self.hall_call_on_times:
            waiting = ", ".join(f"{floor}{direction}" for floor, direction in sorted(self.hall_call_on_times))
            print(f"  Still waiting: {waiting}")
        print("=" * 60)

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False):
        """Draw the car's floor over time with the served calls marked"""
        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        fig = plt.figure(figsize=(12, 6))

        if self.trajectory:
            points = list(self.trajectory)
            if points[-1][0] < self.env.now:
                points.append((self.env.now, points[-1][1]))
            times, floors = zip(*points)
            plt.step(times, floors, where='post', label='Car', linewidth=2.5, color='#1f77b4')

        for (floor, direction), records in self.service_times.items():
            marker = '↑' if direction == 'UP' else '↓'
            for press_time, service_time in records:
                plt.annotate(marker, (press_time, floor), fontsize=14, color='#2ca02c', ha='center', va='center')
                plt.annotate('✕', (press_time + service_time, floor), fontsize=12, color='#d62728', ha='center', va='center')

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time (ms)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)
        if self.trajectory:
            floors = [floor for _, floor in self.trajectory]
            plt.yticks(range(min(floors), max(floors) + 1))
        plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)
        return output_filename
