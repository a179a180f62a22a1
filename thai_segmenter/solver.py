from .tcc import ClusterBoundaryAnalyzer


class SegmentationGraphSolver:
    """
    Maximal matching over a graph of cluster boundaries.

    Nodes are the legal boundary offsets of one Thai span. Every dictionary
    word that starts and ends on a node is an edge; a node with no outgoing
    dictionary edge gets a single fallback edge to the next node so the span
    end is always reachable. Among paths from the first to the last node, the
    one with the fewest fallback edges wins, then the cheapest, then the one
    with the fewest tokens.
    """

    def __init__(self, dictionary, word_cost=1000, length_bonus=1, unknown_cost=10000,
                 analyzer=None):
        self.dictionary = dictionary
        self.word_cost = word_cost
        self.length_bonus = length_bonus
        self.unknown_cost = unknown_cost
        self.analyzer = analyzer or ClusterBoundaryAnalyzer()

    def edge_cost(self, start, end):
        return self.word_cost - self.length_bonus * (end - start)

    def build_graph(self, text):
        """
        Returns (nodes, edges) where edges maps each node to a list of
        (end, cost, is_fallback) tuples, longest match first.
        """
        n = len(text)
        boundaries = self.analyzer.legal_boundaries(text)
        nodes = [i for i in range(n + 1) if boundaries[i]]

        edges = {}
        for pos, i in enumerate(nodes[:-1]):
            out = []
            for j in reversed(self.dictionary.longest_matches_at(text, i, n)):
                # Words ending inside a cluster are not usable
                if boundaries[j]:
                    out.append((j, self.edge_cost(i, j), False))

            if not out:
                out.append((nodes[pos + 1], self.unknown_cost, True))
            edges[i] = out

        return nodes, edges

    def solve(self, text):
        """
        Returns the best segmentation of ``text`` as a list of
        (start, end, is_fallback) edges in left-to-right order.
        """
        n = len(text)
        if n == 0:
            return []

        nodes, edges = self.build_graph(text)

        # best[i] = (fallback count, cost, edge count, previous node, is_fallback)
        # A dictionary-only path always beats one with a fallback edge
        best = {nodes[0]: (0, 0, 0, -1, False)}

        for i in nodes[:-1]:
            if i not in best:
                continue  # Not reachable from the span start
            fallbacks, cost, count = best[i][:3]

            for j, step_cost, is_fallback in edges[i]:
                candidate = (fallbacks + int(is_fallback), cost + step_cost, count + 1)
                current = best.get(j)
                # Strictly better only: the first path found wins ties
                if current is None or candidate < current[:3]:
                    best[j] = candidate + (i, is_fallback)

        # Backtrack
        path = []
        curr = n
        while curr > 0:
            prev, is_fallback = best[curr][3:]
            assert prev >= 0, "segmentation graph has no path to the span end"
            path.append((prev, curr, is_fallback))
            curr = prev

        path.reverse()
        return path

    def segment(self, text, merge_unknown=False):
        """Split one Thai span into words."""
        words = []
        unknown_buffer = []

        for start, end, is_fallback in self.solve(text):
            piece = text[start:end]
            if merge_unknown and is_fallback:
                unknown_buffer.append(piece)
                continue

            if unknown_buffer:
                words.append("".join(unknown_buffer))
                unknown_buffer = []
            words.append(piece)

        if unknown_buffer:
            words.append("".join(unknown_buffer))

        return words
