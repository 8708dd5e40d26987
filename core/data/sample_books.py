# core/data/sample_books.py

# Demo catalog used by the seed command and endpoint
SAMPLE_BOOKS = [
    {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt & David Thomas",
        "cover_image": "https://images.pexels.com/photos/159711/books-bookstore-book-reading-159711.jpeg?auto=compress&cs=tinysrgb&w=300&h=400&fit=crop",
        "availability": True,
        "description": "A practical guide to better programming",
        "genre": "Technology",
    },
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "cover_image": "https://images.pexels.com/photos/1560941/pexels-photo-1560941.jpeg?auto=compress&cs=tinysrgb&w=300&h=400&fit=crop",
        "availability": True,
        "description": "A handbook of agile software craftsmanship",
        "genre": "Technology",
    },
    {
        "title": "The Design of Everyday Things",
        "author": "Don Norman",
        "cover_image": "https://images.pexels.com/photos/1122865/pexels-photo-1122865.jpeg?auto=compress&cs=tinysrgb&w=300&h=400&fit=crop",
        "availability": True,
        "description": "Essential reading for anyone interested in design",
        "genre": "Design",
    },
    {
        "title": "Atomic Habits",
        "author": "James Clear",
        "cover_image": "https://images.pexels.com/photos/1181675/pexels-photo-1181675.jpeg?auto=compress&cs=tinysrgb&w=300&h=400&fit=crop",
        "availability": True,
        "description": "Tiny changes, remarkable results",
        "genre": "Self-Help",
    },
    {
        "title": "The Psychology of Money",
        "author": "Morgan Housel",
        "cover_image": "https://images.pexels.com/photos/1181271/pexels-photo-1181271.jpeg?auto=compress&cs=tinysrgb&w=300&h=400&fit=crop",
        "availability": True,
        "description": "Timeless lessons on wealth, greed, and happiness",
        "genre": "Finance",
    },
    {
        "title": "Sapiens",
        "author": "Yuval Noah Harari",
        "cover_image": "https://images.pexels.com/photos/1181248/pexels-photo-1181248.jpeg?auto=compress&cs=tinysrgb&w=300&h=400&fit=crop",
        "availability": True,
        "description": "A brief history of humankind",
        "genre": "History",
    },
]
