"""Built-in melodies for the music box, each module exposing a SONG."""