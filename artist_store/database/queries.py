"""
SQL statements issued by the artist store.

Every statement uses psycopg's positional ``%s`` placeholders; the column
order of each SELECT is what the row mappers in ``operations`` rely on.
"""

LIST_TOP_ARTISTS = """
    WITH artist_images AS (
        SELECT
            a.id,
            m.image,
            a.category,
            a.job,
            a.rating,
            a.description,
            a.address,
            a.fullname,
            a.dob,
            a.phone,
            ROW_NUMBER() OVER (PARTITION BY a.id ORDER BY m.image) AS rn
        FROM artist a
        JOIN artist_image m ON a.id = m.artist_id
    )
    SELECT id, image, category, job, rating, description, address, fullname, dob, phone
    FROM artist_images
    WHERE rn = 1
    LIMIT %s
"""

ARTIST_DETAIL = """
    SELECT a.id, a.fullname, a.job, a.address, a.category, a.description,
           a.phone, a.rating, a.dob, am.image
    FROM artist a
    JOIN artist_image am ON a.id = am.artist_id
    WHERE a.id = %s
"""

ARTIST_SCHEDULE = """
    SELECT id, artist_id, start_date, end_date, start_time, end_time
    FROM artist_schedule
    WHERE artist_id = %s
"""

ARTIST_BOOKING = """
    SELECT start_date, end_date, start_time, end_time
    FROM booking
    WHERE start_date = %s AND artist_id = %s
"""

UPDATE_DESCRIPTION = """
    UPDATE artist
    SET description = %s
    WHERE id = %s
"""

DELETE_IMAGES = """
    DELETE FROM artist_image
    WHERE artist_id = %s
"""

INSERT_IMAGE = """
    INSERT INTO artist_image (artist_id, image)
    VALUES (%s, %s)
"""

DELETE_SCHEDULE = """
    DELETE FROM artist_schedule
    WHERE artist_id = %s
      AND start_date = %s
      AND start_time = %s
"""

INSERT_SCHEDULE = """
    INSERT INTO artist_schedule (artist_id, start_date, end_date, start_time, end_time)
    VALUES (%s, %s, %s, %s, %s)
"""
