"""
NEAT Network Module

This module implements the graph evaluation engine: a directed, weighted and
possibly cyclic network of nodes, evaluated by a fixed number of relaxation
passes rather than in topological order.

Classes:
    InvalidEndpointRole: Raised when a link would leave an output or enter an input node
    ArityMismatch:       Raised when the number of inputs does not match the input nodes
    Network:             Owns the nodes and links, exposes queries, mutation and evaluation
"""

import logging
from typing import Sequence

from neatgraph.activations import activation_codes
from neatgraph.genotype import Link, Node, NodeType
from neatgraph.run.config import Config

logger = logging.getLogger(__name__)

class InvalidEndpointRole(ValueError):
    """A link cannot start at an OUTPUT node nor end at an INPUT node."""

class ArityMismatch(ValueError):
    """The number of values passed to 'evaluate' differs from the number of input nodes."""

class Network:
    """
    A NEAT neural network, evaluated by fixed-iteration relaxation.

    The network owns a growable sequence of nodes and a growable sequence of links.
    On construction it holds all INPUT nodes followed by all OUTPUT nodes; HIDDEN
    nodes are appended later. A node ID is always its index in the node sequence.

    Links may form cycles and self-loops. They are never removed: a link is taken
    out of the computation by setting its 'enabled' flag to False, so that its
    innovation number stays available for crossover.

    The network does not track a global innovation counter. Callers pass in the
    current maximum (see 'max_innovation()') and 'add_link' returns the number it
    assigned, so a single counter can be threaded across a whole population.

    Public Properties:
        nodes:                      The nodes, ordered by ID
        links:                      The links, in insertion order
        num_inputs:                 Number of input nodes
        num_outputs:                Number of output nodes
        config:                     Evaluation settings (squashing function, iterations)
        number_nodes:               Total number of nodes in the network
        number_nodes_hidden:        Number of hidden nodes in the network
        number_connections:         Total number of links in the network
        number_connections_enabled: Number of enabled links in the network

    Public Methods:
        max_innovation():     The largest innovation number among the links (0 if none)
        nodes_of_type(type):  The nodes of a given type, in creation order
        link_by_innovation(): The link with a given innovation number, or None
        inbound_links(id):    The links ending at a node
        inbound_nodes(id):    The source node of each inbound link
        inbound_values(id):   The current value of each inbound source node
        add_link(...):        Append a new enabled link, returning its innovation number
        add_hidden_node():    Append a new hidden node, returning its ID
        evaluate(inputs):     Propagate the inputs through the network
        reset():              Set all node values back to zero
    """

    def __init__(self, num_inputs: int, num_outputs: int, config: Config):
        """
        Parameters:
            num_inputs:  the number of input nodes
            num_outputs: the number of output nodes
            config:      provides the squashing function ('squash') and
                         the number of relaxation passes ('eval_iterations')
        """
        if num_inputs < 0 or num_outputs < 0:
            raise ValueError(f"Node counts must be non-negative, got {num_inputs} inputs and {num_outputs} outputs")

        self._num_inputs : int        = num_inputs
        self._num_outputs: int        = num_outputs
        self._config     : Config     = config
        self._nodes      : list[Node] = []
        self._links      : list[Link] = []

        for _ in range(num_inputs):
            self._nodes.append(Node(len(self._nodes), NodeType.INPUT))

        for _ in range(num_outputs):
            self._nodes.append(Node(len(self._nodes), NodeType.OUTPUT))

    @classmethod
    def from_config(cls, config: Config) -> 'Network':
        """
        Create a network sized according to the configuration.

        Parameters:
            config: provides 'num_inputs' and 'num_outputs' besides the evaluation settings

        Returns:
            a network with no links
        """
        return cls(config.num_inputs, config.num_outputs, config)

    @property
    def nodes(self) -> tuple[Node, ...]:
        """The nodes of the network, ordered by ID."""
        return tuple(self._nodes)

    @property
    def links(self) -> tuple[Link, ...]:
        """The links of the network, in insertion order."""
        return tuple(self._links)

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def config(self) -> Config:
        return self._config

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._nodes)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return len(self._nodes) - self._num_inputs - self._num_outputs

    @property
    def number_connections(self) -> int:
        """Total number of links in the network."""
        return len(self._links)

    @property
    def number_connections_enabled(self) -> int:
        """Number of enabled links in the network."""
        return sum(1 for link in self._links if link.enabled)

    def max_innovation(self) -> int:
        """
        The largest innovation number among the links of this network.
        Used by callers as the basis for the innovation number of the next link.

        Returns:
            the maximum innovation number, or 0 if the network has no links
        """
        return max((link.innovation for link in self._links), default=0)

    def nodes_of_type(self, node_type: NodeType) -> list[Node]:
        """
        Parameters:
            node_type: INPUT, HIDDEN or OUTPUT

        Returns:
            the nodes of the requested type, in creation order
        """
        return [node for node in self._nodes if node.type == node_type]

    def link_by_innovation(self, innovation: int) -> Link | None:
        """
        Find a link (enabled or disabled) by its innovation number.

        Parameters:
            innovation: the innovation number to look for

        Returns:
            the first link with that innovation number, or None if there is none
        """
        return next((link for link in self._links if link.innovation == innovation), None)

    def inbound_links(self, node_id: int) -> list[Link]:
        """All links (enabled or disabled) ending at 'node_id', in insertion order."""
        return [link for link in self._links if link.node_out == node_id]

    def inbound_nodes(self, node_id: int) -> list[Node]:
        """The source node of each link returned by 'inbound_links', in the same order."""
        return [self._nodes[link.node_in] for link in self.inbound_links(node_id)]

    def inbound_values(self, node_id: int) -> list[float]:
        """The current value of each node returned by 'inbound_nodes', in the same order."""
        return [node.value for node in self.inbound_nodes(node_id)]

    def add_link(self, base_innovation: int, node_in: int, node_out: int, weight: float) -> int:
        """
        Append a new, enabled link to the network.

        Duplicate links, self-loops and cycles are all allowed.
        Nothing is modified if the link is rejected.

        Parameters:
            base_innovation: the current global maximum innovation number
            node_in:         ID of the source node (must not be an OUTPUT node)
            node_out:        ID of the destination node (must not be an INPUT node)
            weight:          weight of the new link

        Returns:
            the innovation number assigned to the new link ('base_innovation' + 1)
        """
        source = self._get_node(node_in)
        target = self._get_node(node_out)

        if source.type == NodeType.OUTPUT:
            raise InvalidEndpointRole(f"Link source {node_in} is an output node")
        if target.type == NodeType.INPUT:
            raise InvalidEndpointRole(f"Link destination {node_out} is an input node")

        innovation = base_innovation + 1
        self._links.append(Link(node_in, node_out, weight, innovation))
        logger.debug("Added link %d: %d => %d, weight %s", innovation, node_in, node_out, weight)

        return innovation

    def add_hidden_node(self) -> int:
        """
        Append a new hidden node to the network.

        Returns:
            the ID of the new node
        """
        node = Node(len(self._nodes), NodeType.HIDDEN)
        self._nodes.append(node)
        logger.debug("Added hidden node %d", node.id)
        return node.id

    def evaluate(self, inputs: Sequence[float]) -> list[float]:
        """
        Propagate the inputs through the network.

        The input values are assigned to the input nodes, then 'config.eval_iterations'
        relaxation passes are performed. Each pass visits every node in ascending ID
        order and, if the node has at least one inbound link, sets its value to the
        squashed weighted sum of its enabled inbound links. Updates happen in place:
        a node visited later in the same pass reads the values already written.
        Nodes without inbound links keep their value.

        Only input nodes are re-seeded, so in a recurrent network the values left
        by the previous evaluation take part in this one (see 'reset()').

        Parameters:
            inputs: the network inputs (as many as input nodes)

        Returns:
            the values of the output nodes, in creation order
        """
        # The number of inputs must match the number of input nodes
        if len(inputs) != self._num_inputs:
            raise ArityMismatch(f"Expected {self._num_inputs} inputs, got {len(inputs)}")

        # Set input values
        for node, value in zip(self.nodes_of_type(NodeType.INPUT), inputs):
            node.value = value

        # The topology does not change during an evaluation
        incoming: dict[int, list[Link]] = {}
        for link in self._links:
            incoming.setdefault(link.node_out, []).append(link)

        squash = self._config.squash
        for _ in range(self._config.eval_iterations):
            for node in self._nodes:
                links_in = incoming.get(node.id)
                if links_in:
                    weighted_sum = sum(link.weight * self._nodes[link.node_in].value
                                       for link in links_in if link.enabled)
                    node.value = squash(weighted_sum)

        logger.debug("Evaluated %d passes over %d nodes", self._config.eval_iterations, len(self._nodes))

        # Get output values
        return [node.value for node in self.nodes_of_type(NodeType.OUTPUT)]

    def reset(self) -> None:
        """Set the value of every node back to zero."""
        for node in self._nodes:
            node.value = 0.0

    def _get_node(self, node_id: int) -> Node:
        if not 0 <= node_id < len(self._nodes):
            raise KeyError(f"Node with ID {node_id} does not exist in the network")
        return self._nodes[node_id]

    def __str__(self):
        nodes_str = "\n".join([f"  {node}" for node in self._nodes])
        links_str = "\n".join([f"  {link}" for link in self._links])
        # 3-letter code of the squashing function, "???" for custom functions
        squash_code = activation_codes.get(self._config.squash_name, "???")
        header = f"-- NETWORK [{squash_code} x{self._config.eval_iterations}] --"
        return f"{header}\nNodes:\n{nodes_str}\n\nLinks:\n{links_str}\n-------------"
