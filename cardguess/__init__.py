"""Motor de codificación Huffman para el adivinador de cartas."""
