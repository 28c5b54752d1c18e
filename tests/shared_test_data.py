"""Shared test data for imgflip tests."""

DISTRACTED_BOYFRIEND = {
    "id": "112126428",
    "name": "Distracted Boyfriend",
    "url": "https://i.imgflip.com/1ur9b0.jpg",
    "width": 1200,
    "height": 800,
    "box_count": 3,
}

DRAKE_HOTLINE_BLING = {
    "id": "181913649",
    "name": "Drake Hotline Bling",
    "url": "https://i.imgflip.com/30b1gx.jpg",
    "width": 1200,
    "height": 1200,
    "box_count": 2,
}

GET_MEMES_RESPONSE = {
    "success": True,
    "data": {"memes": [DISTRACTED_BOYFRIEND, DRAKE_HOTLINE_BLING]},
}

CAPTION_IMAGE_RESPONSE = {
    "success": True,
    "data": {
        "url": "https://i.imgflip.com/123abc.jpg",
        "page_url": "https://imgflip.com/i/123abc",
    },
}

INVALID_LOGIN_RESPONSE = {
    "success": False,
    "error_message": "Invalid username/password combination",
}

TEST_USERNAME = "test-user"
TEST_PASSWORD = "test-password"
