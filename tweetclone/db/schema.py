"""Database schema definitions for tweetclone."""

SCHEMA = """
-- Users: one row per identity, nickname doubles as the public URL segment
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nickname TEXT NOT NULL UNIQUE,
    email TEXT,
    formatted_name TEXT,
    provider TEXT,
    identifier TEXT UNIQUE,  -- external identity-provider reference
    photo_url TEXT,
    location TEXT,
    description TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Statuses: public posts (recipient_id IS NULL) and direct messages
CREATE TABLE IF NOT EXISTS statuses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner_id INTEGER NOT NULL,
    recipient_id INTEGER,
    text TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL,
    FOREIGN KEY (owner_id) REFERENCES users(id) ON DELETE CASCADE,
    FOREIGN KEY (recipient_id) REFERENCES users(id) ON DELETE CASCADE
);

-- Follow edges: follower_id follows user_id
CREATE TABLE IF NOT EXISTS relationships (
    user_id INTEGER NOT NULL,
    follower_id INTEGER NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (user_id, follower_id),
    CHECK (user_id != follower_id),
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
    FOREIGN KEY (follower_id) REFERENCES users(id) ON DELETE CASCADE
);

-- Mention edges: status_id mentions user_id
CREATE TABLE IF NOT EXISTS mentions (
    user_id INTEGER NOT NULL,
    status_id INTEGER NOT NULL,
    PRIMARY KEY (user_id, status_id),
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
    FOREIGN KEY (status_id) REFERENCES statuses(id) ON DELETE CASCADE
);

-- Indexes
CREATE INDEX IF NOT EXISTS idx_statuses_owner_public
    ON statuses(owner_id, created_at DESC) WHERE recipient_id IS NULL;
CREATE INDEX IF NOT EXISTS idx_statuses_created ON statuses(created_at DESC);
CREATE INDEX IF NOT EXISTS idx_statuses_recipient ON statuses(recipient_id) WHERE recipient_id IS NOT NULL;
CREATE INDEX IF NOT EXISTS idx_relationships_follower ON relationships(follower_id);
CREATE INDEX IF NOT EXISTS idx_mentions_status ON mentions(status_id);

-- created_at is written once, on insert
CREATE TRIGGER IF NOT EXISTS statuses_created_at_immutable
BEFORE UPDATE OF created_at ON statuses
WHEN OLD.created_at IS NOT NEW.created_at
BEGIN
    SELECT RAISE(ABORT, 'statuses.created_at is immutable');
END;

-- nickname is used in URLs and never changes once assigned
CREATE TRIGGER IF NOT EXISTS users_nickname_immutable
BEFORE UPDATE OF nickname ON users
WHEN OLD.nickname IS NOT NEW.nickname
BEGIN
    SELECT RAISE(ABORT, 'users.nickname is immutable');
END;
"""
