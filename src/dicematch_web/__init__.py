"""Flask front end for the Dice matcher: JSON API plus a one-page UI."""
