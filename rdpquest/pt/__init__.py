"""The Portuguese edition of the game: classes, enemies, battles, dungeons and saves."""