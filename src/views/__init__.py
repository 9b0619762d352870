"""
View binders for Taj Mahal Reviews.

- Details screen: restaurant profile and rating summary
- Review list screen: reviews, review form feedback
- Console renderings of both screens
"""
