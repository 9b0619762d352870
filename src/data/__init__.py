"""
Data layer for Taj Mahal Reviews.

- RestaurantApi: data source seam (with an in-memory fake)
- RestaurantRepository: observable store for the restaurant and its reviews
"""
