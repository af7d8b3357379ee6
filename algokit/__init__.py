"""Classic algorithms: arithmetic, sorting, binary search, greedy strategies and Huffman coding."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "sorting", "search", "greedy", "huffman"]