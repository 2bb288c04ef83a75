"""
Example: Basic quadtree compression, pruning and rotation
"""

from PIL import Image
import numpy as np
from quadpress import RegionTree
from quadpress.metrics import mse, psnr

# Create a sample image
print("Creating sample image...")
size = 256
image_array = np.zeros((size, size, 3), dtype=np.uint8)

# Create a pattern of flat bands with a soft gradient
for y in range(size):
    for x in range(size):
        image_array[y, x] = [(x // 32) * 32, (y // 64) * 64, (x + y) // 4 % 256]

sample_image = Image.fromarray(image_array)
sample_image.save('/tmp/sample_original.png')
print(f"Sample image saved to /tmp/sample_original.png")

# Build the tree
print("\nBuilding region tree...")
tree = RegionTree(sample_image, size)
print(f"Leaves: {tree.leaf_count()}")

# Find the tolerance that fits a leaf budget, then prune
print("\n" + "=" * 50)
print("Testing different leaf budgets:")
print("=" * 50)

for budget in [20000, 5000, 1000]:
    pruned = tree.copy()
    tolerance = pruned.ideal_prune(budget)
    pruned.prune(tolerance)
    decoded = pruned.decompress()

    print(f"\nBudget {budget}:")
    print(f"  Tolerance: {tolerance}")
    print(f"  Leaves: {pruned.leaf_count()}")
    print(f"  MSE: {mse(sample_image, decoded):.2f}")
    print(f"  PSNR: {psnr(sample_image, decoded):.2f} dB")

# Rotate the pruned tree and save the result
print("\nRotating...")
pruned.clockwise_rotate()
pruned.decompress().save('/tmp/sample_rotated.png')
print(f"Rotated image saved to /tmp/sample_rotated.png")
