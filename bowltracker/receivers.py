"""Receivers that log the progress of the games being scored."""
import logging


def log_score_updated(sender, frame_number, score, **kwargs):
    logging.debug('Score through frame {} is {}.'.format(frame_number, score))


def log_end_of_game(sender, score, **kwargs):
    logging.info('Game is complete with a score of {}.'.format(score))


def log_perfect_game(sender, score, **kwargs):
    logging.info('Perfect game! Score: {}.'.format(score))
