import simpy


class MessageBroker:
    """
    Topic-based publish-subscribe channel between the elevator core and
    its observers (presentation ports, recorders).

    Every published message is also copied to a single broadcast pipe so a
    recorder can watch all traffic in publication order.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = True):
        """
        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every published message
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # topic -> simpy.Store
        self.broadcast_pipe = simpy.Store(self.env)

    def get_pipe(self, topic: str) -> simpy.Store:
        """Get or create the Store for the specified topic"""
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message: dict):
        """
        Publish a message to topic.

        Stores are unbounded, so the returned put event is already triggered;
        callers outside a process may ignore it.
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        return self.get_pipe(topic).put(message)

    def get(self, topic: str):
        """Wait to receive the next message on topic"""
        return self.get_pipe(topic).get()

    def get_broadcast_pipe(self) -> simpy.Store:
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """Current simulation time (milliseconds)"""
        return self.env.now
